"""
State Layer - Runtime Data Models

This module defines the runtime state that tracks an agent's walk through a
decision tree. The traversal history is an explicit stack of steps taken,
not a visited-set, so trees with cycles can be walked back step by step.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import DecisionTree


class NavigationHistory(BaseModel):
    """
    One step already taken.
    """
    # The node that was current *before* the step
    node_id: str
    selected_option: str


class NavigationState(BaseModel):
    """
    Position of a navigator inside its tree.
    """
    current_node_id: str
    history: List[NavigationHistory] = Field(default_factory=list)


class NavigationSession(BaseModel):
    """
    The state for a single troubleshooting session.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    session_id: str
    device_id: str
    # Snapshot taken at session start; later edits to the tree do not leak in
    tree: DecisionTree = Field(exclude=True, repr=False)
    state: NavigationState
    # Inline solution of the last terminal option picked on the current node
    inline_solution: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
