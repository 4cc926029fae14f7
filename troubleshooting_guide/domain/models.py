"""
Domain Layer - Static Data Models

This module defines the core domain model representing the static structure
of troubleshooting guides: the Devices we support and the Decision Trees an
agent walks for each of them. These dataclasses are built from stored JSON
documents and are treated as read-only for the duration of a session.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple


@dataclass
class Device:
    """
    A supported product.

    Attributes:
        id: Unique identifier, also the key of the device's DecisionTree.
        name: Display name (e.g. "Hair Dryer Pro 2024").
        model: Model number shown next to the name.
        core_device: Product family used for filtering (e.g. "Hair Dryer").
        brand_name: Brand used for filtering.
        image_url: Optional picture for the device card.
    """
    id: str
    name: str
    model: str
    core_device: str
    brand_name: str
    image_url: Optional[str] = None


@dataclass
class DecisionOption:
    """
    A choice presented at a node.

    An option either moves the agent to another node (next_node_id) or is
    itself an end state. Terminal options usually carry an inline solution
    that is shown under the option without leaving the current node.

    Attributes:
        id: Unique identifier within the node's option list.
        text: Label shown to the agent.
        next_node_id: Node to transition to. None means the option is terminal.
        solution: Inline solution text.
    """
    id: str
    text: str
    next_node_id: Optional[str] = None
    solution: Optional[str] = None


@dataclass
class DecisionNode:
    """
    A question in the tree.

    Attributes:
        id: Unique identifier within the tree.
        question: Prompt text.
        description: Optional elaboration text.
        options: Ordered choices. Only terminal nodes may have none.
        is_terminal: Explicit end-state flag.
        solution: Recommended action, shown on terminal nodes.
        additional_info: Supplementary text shown alongside the solution.
    """
    id: str
    question: str
    description: Optional[str] = None
    options: List[DecisionOption] = field(default_factory=list)
    is_terminal: bool = False
    solution: Optional[str] = None
    additional_info: Optional[str] = None

    def get_option(self, option_id: str) -> Optional[DecisionOption]:
        return next((opt for opt in self.options if opt.id == option_id), None)


@dataclass
class DecisionTree:
    """
    Troubleshooting procedure for one device.

    Attributes:
        device_id: Key into the device set.
        root_node_id: Entry node. Must be a key of nodes.
        nodes: Dict mapping node IDs to DecisionNode objects (O(1) lookup).
    """
    device_id: str
    root_node_id: str
    nodes: Dict[str, DecisionNode] = field(default_factory=dict)

    def dangling_references(self) -> List[Tuple[str, str, str]]:
        """
        Lists (node_id, option_id, next_node_id) for every option pointing
        at a node that is not part of the tree.
        """
        return [
            (node.id, opt.id, opt.next_node_id)
            for node in self.nodes.values()
            for opt in node.options
            if opt.next_node_id and opt.next_node_id not in self.nodes
        ]


def is_terminal(node: DecisionNode) -> bool:
    """
    A node is terminal when it is flagged as such, or when none of its
    options leads anywhere: every option either lacks a next_node_id or
    carries an inline solution.
    """
    if node.is_terminal:
        return True
    return all(not opt.next_node_id or bool(opt.solution) for opt in node.options)
