"""
Navigation Service - Session Orchestration Layer

This service is the entry point for all troubleshooting sessions. It loads the
device's decision tree once per session, hands each request to a
DecisionTreeNavigator bound to that session's state, and renders the result
for the presentation layer.
"""

import logging
import uuid
from typing import Optional

from ..config import settings
from ..navigation.navigator import DecisionTreeNavigator
from ..repositories.decision_tree import DecisionTreeRepository
from ..repositories.session import SessionRepository
from ..state.models import NavigationSession, NavigationState
from .exceptions import DecisionTreeNotFoundError, SessionNotFoundError

logger = logging.getLogger(__name__)


class NavigationService:
    def __init__(
        self,
        session_repository: SessionRepository,
        tree_repository: DecisionTreeRepository,
        expected_steps: Optional[int] = None,
    ):
        self.session_repo = session_repository
        self.tree_repo = tree_repository
        self.expected_steps = (
            settings.PROGRESS_EXPECTED_STEPS if expected_steps is None else expected_steps
        )

    def start_session(self, device_id: str) -> NavigationSession:
        """
        Takes a snapshot of the device's tree and positions a new session at
        its root.
        """
        tree = self.tree_repo.get_tree(device_id)
        if tree is None:
            raise DecisionTreeNotFoundError(
                f"No troubleshooting procedure found for device '{device_id}'."
            )

        session = NavigationSession(
            session_id=str(uuid.uuid4()),
            device_id=device_id,
            tree=tree,
            state=NavigationState(current_node_id=tree.root_node_id),
        )
        # Surface a missing root now rather than on the first render
        DecisionTreeNavigator(session.tree, session.state).current()

        self.session_repo.add(session)
        logger.info(f"Started session {session.session_id} for device '{device_id}'")
        return session

    def get_session(self, session_id: str) -> NavigationSession:
        session = self.session_repo.get(session_id)
        if not session:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session

    def end_session(self, session_id: str) -> bool:
        deleted = self.session_repo.delete(session_id)
        if deleted:
            logger.info(f"Ended session {session_id}")
        return deleted

    def select(self, session_id: str, option_id: str) -> NavigationSession:
        session = self.get_session(session_id)
        navigator = self._navigator(session)

        option = navigator.selected_option(option_id)
        navigator.select(option_id)

        # Terminal options stay on the node and show their solution inline
        session.inline_solution = None if option.next_node_id else option.solution

        self.session_repo.save(session)
        return session

    def back(self, session_id: str) -> NavigationSession:
        session = self.get_session(session_id)
        self._navigator(session).back()
        session.inline_solution = None
        self.session_repo.save(session)
        return session

    def restart(self, session_id: str) -> NavigationSession:
        session = self.get_session(session_id)
        self._navigator(session).restart()
        session.inline_solution = None
        self.session_repo.save(session)
        logger.debug(f"Session {session_id} restarted")
        return session

    def describe(self, session: NavigationSession) -> dict:
        """
        Renders what the presentation layer needs for the current node.
        """
        navigator = self._navigator(session)
        node = navigator.current()

        return {
            "session_id": session.session_id,
            "device_id": session.device_id,
            "node": {
                "id": node.id,
                "question": node.question,
                "description": node.description,
                "options": [
                    {
                        "id": opt.id,
                        "text": opt.text,
                        "next_node_id": opt.next_node_id,
                        "solution": opt.solution,
                    }
                    for opt in node.options
                ],
                "solution": node.solution,
                "additional_info": node.additional_info,
            },
            "is_terminal": navigator.is_terminal(node),
            "progress": navigator.progress(),
            "progress_percent": navigator.progress_percent(self.expected_steps),
            "can_go_back": navigator.can_go_back,
            "history": [step.model_dump() for step in navigator.history],
            "inline_solution": session.inline_solution,
        }

    def _navigator(self, session: NavigationSession) -> DecisionTreeNavigator:
        return DecisionTreeNavigator(session.tree, session.state)
