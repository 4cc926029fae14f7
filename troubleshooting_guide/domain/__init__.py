"""
Domain Layer - Static Data Models

Defines the core domain model representing the static structure of
troubleshooting guides: Devices, Decision Trees, Nodes and Options.
"""

from troubleshooting_guide.domain.models import (
    DecisionNode,
    DecisionOption,
    DecisionTree,
    Device,
    is_terminal,
)

__all__ = [
    "DecisionNode",
    "DecisionOption",
    "DecisionTree",
    "Device",
    "is_terminal",
]
