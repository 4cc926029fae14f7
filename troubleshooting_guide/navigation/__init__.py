"""
Navigation Layer - Decision Tree State Machine

Defines the DecisionTreeNavigator and the errors it raises when a tree is
malformed or a caller selects an option the current node does not offer.
"""

from troubleshooting_guide.navigation.exceptions import (
    DanglingReferenceError,
    NavigatorError,
    NodeNotFoundError,
    UnknownOptionError,
)
from troubleshooting_guide.navigation.navigator import DecisionTreeNavigator


__all__ = [
    "DanglingReferenceError",
    "DecisionTreeNavigator",
    "NavigatorError",
    "NodeNotFoundError",
    "UnknownOptionError",
]
