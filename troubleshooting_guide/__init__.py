"""
Device Troubleshooting Guide

A decision-tree troubleshooting guide: support agents pick a device and
answer a sequence of multiple-choice questions until a recommended solution
is reached, with back and restart navigation over the path taken.
"""

from troubleshooting_guide.domain import (
    DecisionNode,
    DecisionOption,
    DecisionTree,
    Device,
    is_terminal,
)
from troubleshooting_guide.state import (
    NavigationHistory,
    NavigationSession,
    NavigationState,
)
from troubleshooting_guide.schemas import TreeValidationError, validate_tree_document
from troubleshooting_guide.navigation import (
    DanglingReferenceError,
    DecisionTreeNavigator,
    NavigatorError,
    NodeNotFoundError,
    UnknownOptionError,
)

__all__ = [
    # Domain Layer
    "DecisionNode",
    "DecisionOption",
    "DecisionTree",
    "Device",
    "is_terminal",
    # State Layer
    "NavigationHistory",
    "NavigationSession",
    "NavigationState",
    # Schemas
    "TreeValidationError",
    "validate_tree_document",
    # Navigation Layer
    "DanglingReferenceError",
    "DecisionTreeNavigator",
    "NavigatorError",
    "NodeNotFoundError",
    "UnknownOptionError",
]
