from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Dict

from ..state.models import NavigationSession


class SessionRepository(ABC):
    """
    Defines how the application accesses navigation sessions.
    Every session is owned by a single caller; nothing here coordinates
    concurrent writers.
    """

    @abstractmethod
    def add(self, session: NavigationSession):
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[NavigationSession]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def save(self, session: NavigationSession):
        """Persists the session state."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemorySessionRepository(SessionRepository):
    """
    Uses in-memory dictionary for session storage.
    Sessions are discarded when the process ends.
    """

    def __init__(self):
        self._store: Dict[str, NavigationSession] = {}

    def add(self, session: NavigationSession):
        self._store[session.session_id] = session

    def get(self, session_id: str) -> Optional[NavigationSession]:
        return self._store.get(session_id)

    def save(self, session: NavigationSession):
        if session.session_id not in self._store:
            raise ValueError(f"Session {session.session_id} does not exist.")
        session.updated_at = datetime.utcnow()
        self._store[session.session_id] = session

    def delete(self, session_id: str) -> bool:
        if session_id in self._store:
            del self._store[session_id]
            return True
        return False
