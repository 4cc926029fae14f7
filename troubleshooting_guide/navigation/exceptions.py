"""
Navigation Exceptions

Errors raised by the DecisionTreeNavigator. They all point at either a
malformed tree or a caller that is out of sync with the navigator; none of
them is transient, so nothing here is retried.
"""


class NavigatorError(Exception):
    """Base class for navigation errors."""
    pass


class NodeNotFoundError(NavigatorError):
    """Raised when a node the navigator needs is absent from the tree."""

    def __init__(self, node_id: str, device_id: str = ""):
        self.node_id = node_id
        self.device_id = device_id
        super().__init__(f"Node '{node_id}' not found in decision tree '{device_id}'.")


class DanglingReferenceError(NodeNotFoundError):
    """Raised when an option points at a node that is not part of the tree."""

    def __init__(self, node_id: str, option_id: str, next_node_id: str, device_id: str = ""):
        self.option_id = option_id
        self.source_node_id = node_id
        super().__init__(next_node_id, device_id)
        self.args = (
            f"Option '{option_id}' on node '{node_id}' points at unknown node "
            f"'{next_node_id}' in decision tree '{device_id}'.",
        )


class UnknownOptionError(NavigatorError):
    """Raised when the caller selects an option the current node does not offer."""

    def __init__(self, option_id: str, node_id: str):
        self.option_id = option_id
        self.node_id = node_id
        super().__init__(f"Option '{option_id}' is not offered by node '{node_id}'.")
