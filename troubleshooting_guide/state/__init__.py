"""
State Layer - Runtime Data Models

Defines the runtime state model that tracks an agent's progress through
a decision tree, including the traversal history stack.
"""

from troubleshooting_guide.state.models import (
    NavigationHistory,
    NavigationSession,
    NavigationState,
)

__all__ = [
    "NavigationHistory",
    "NavigationSession",
    "NavigationState",
]
