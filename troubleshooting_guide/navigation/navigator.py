"""
Navigator - Decision Tree State Machine

The DecisionTreeNavigator is the deterministic state machine that tracks
where an agent is inside one device's decision tree.
-----------------------------------------------

States are node IDs, the initial state is the tree's root with an empty
history, and the only transition is select() on an option that carries a
next_node_id. Options without one are end states: selecting them leaves the
pointer where it is so their inline solution can be shown under the option.

History is a stack of the steps actually taken. Trees may contain cycles, and
back() always returns to the immediately preceding step, not to the first
visit of a node.

One navigator per session. It performs no I/O and owns no locks; the tree is
a read-only snapshot supplied by the caller.
"""

import logging
from typing import List, Optional

from ..domain.models import DecisionNode, DecisionOption, DecisionTree, is_terminal
from ..state.models import NavigationHistory, NavigationState
from .exceptions import DanglingReferenceError, NodeNotFoundError, UnknownOptionError

logger = logging.getLogger(__name__)

# Step count the progress bar treats as "complete"
DEFAULT_EXPECTED_STEPS = 5


class DecisionTreeNavigator:
    def __init__(self, tree: DecisionTree, state: Optional[NavigationState] = None):
        self.tree = tree
        self.state = state if state is not None else NavigationState(current_node_id=tree.root_node_id)

    @property
    def current_node_id(self) -> str:
        return self.state.current_node_id

    @property
    def history(self) -> List[NavigationHistory]:
        return list(self.state.history)

    @property
    def can_go_back(self) -> bool:
        return bool(self.state.history)

    # ==========================================================================
    # Operations
    # ==========================================================================

    def current(self) -> DecisionNode:
        return self._get_node(self.state.current_node_id)

    def select(self, option_id: str) -> DecisionNode:
        """
        Applies the agent's choice at the current node.

        Options leading to another node push a history entry and move the
        pointer. Terminal options (no next_node_id) leave the state untouched.
        When an option carries both a next_node_id and a solution, the
        transition wins.
        """
        node = self.current()
        option = self.selected_option(option_id)

        if not option.next_node_id:
            logger.debug(f"Terminal option '{option_id}' selected on node '{node.id}'")
            return node

        if option.next_node_id not in self.tree.nodes:
            logger.error(
                f"Dangling reference in tree '{self.tree.device_id}': "
                f"{node.id}.{option_id} -> {option.next_node_id}"
            )
            raise DanglingReferenceError(
                node.id, option_id, option.next_node_id, self.tree.device_id
            )

        self.state.history.append(
            NavigationHistory(node_id=node.id, selected_option=option_id)
        )
        self.state.current_node_id = option.next_node_id
        logger.debug(f"Advanced {node.id} -> {option.next_node_id} via '{option_id}'")
        return self.current()

    def back(self) -> DecisionNode:
        """Steps back one entry. With an empty history this is a no-op."""
        if self.state.history:
            previous = self.state.history.pop()
            self.state.current_node_id = previous.node_id
            logger.debug(f"Stepped back to '{previous.node_id}'")
        return self.current()

    def restart(self) -> DecisionNode:
        self.state.current_node_id = self.tree.root_node_id
        self.state.history.clear()
        return self.current()

    # ==========================================================================
    # Derived Queries
    # ==========================================================================

    def is_terminal(self, node: Optional[DecisionNode] = None) -> bool:
        return is_terminal(node if node is not None else self.current())

    def progress(self) -> int:
        return len(self.state.history) + 1

    def progress_percent(self, expected_steps: int = DEFAULT_EXPECTED_STEPS) -> float:
        """Cosmetic progress indicator, saturating at 100."""
        if expected_steps <= 0:
            return 100.0
        return min(self.progress() / expected_steps * 100, 100.0)

    def selected_option(self, option_id: str) -> DecisionOption:
        node = self.current()
        option = node.get_option(option_id)
        if option is None:
            raise UnknownOptionError(option_id, node.id)
        return option

    # ==========================================================================
    # Standard Helpers
    # ==========================================================================

    def _get_node(self, node_id: str) -> DecisionNode:
        node = self.tree.nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id, self.tree.device_id)
        return node
