"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation. Device and tree
payloads reuse the camelCase documents from troubleshooting_guide.schemas.
"""

from typing import Optional

from pydantic import BaseModel


class CreateSessionRequest(BaseModel):
    device_id: str


class SelectOptionRequest(BaseModel):
    option_id: str


class OptionView(BaseModel):
    id: str
    text: str
    next_node_id: Optional[str] = None
    solution: Optional[str] = None


class NodeView(BaseModel):
    id: str
    question: str
    description: Optional[str] = None
    options: list[OptionView]
    solution: Optional[str] = None
    additional_info: Optional[str] = None


class HistoryEntry(BaseModel):
    node_id: str
    selected_option: str


class SessionResponse(BaseModel):
    session_id: str
    device_id: str
    node: NodeView
    is_terminal: bool
    progress: int
    progress_percent: float
    can_go_back: bool
    history: list[HistoryEntry]
    # Set after picking a terminal option on the current node
    inline_solution: Optional[str] = None


class DeviceFacets(BaseModel):
    core_devices: list[str]
    brand_names: list[str]


class ErrorResponse(BaseModel):
    detail: str
