"""Session registry implementation."""

from typing import Protocol

from ..models import Session


class ISessionRegistry(Protocol):
    """Mapping from user id to handoff Session."""

    def get(self, user_id: str) -> Session | None:
        """Get the Session for a user, if any."""
        ...

    def get_active(self, user_id: str) -> Session | None:
        """Get the Session only if it has a conversation."""
        ...

    def put(self, user_id: str, session: Session) -> None:
        """Store a Session for a user."""
        ...

    def delete(self, user_id: str) -> bool:
        """Delete a user's Session. Returns True if one was removed."""
        ...

    def clear(self) -> None:
        """Remove all sessions."""
        ...


class SessionRegistry:
    """Process-local session registry."""

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def get(self, user_id: str) -> Session | None:
        """Get the Session for a user, if any."""
        return self._sessions.get(user_id)

    def get_active(self, user_id: str) -> Session | None:
        """Get the Session only if it has a conversation."""
        session = self._sessions.get(user_id)
        if session is None or not session.is_active:
            return None
        return session

    def put(self, user_id: str, session: Session) -> None:
        """Store a Session for a user."""
        if session.conversation_ref is not None and not session.contact_ref:
            raise ValueError("Session with a conversation must have a contact")
        self._sessions[user_id] = session

    def delete(self, user_id: str) -> bool:
        """Delete a user's Session. Returns True if one was removed."""
        return self._sessions.pop(user_id, None) is not None

    def clear(self) -> None:
        """Remove all sessions."""
        self._sessions.clear()

    def __contains__(self, user_id: str) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
