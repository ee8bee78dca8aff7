"""Handoff session data model."""

from dataclasses import dataclass


@dataclass
class Session:
    """Per-user link to a conversation in the external helpdesk."""

    contact_ref: str
    conversation_ref: str | None = None
    last_agent_marker: int | None = None  # highest merged agent message id
    last_announced_agent_name: str | None = None

    @property
    def is_active(self) -> bool:
        """True while a human-agent conversation is open."""
        return self.conversation_ref is not None

    def advance_marker(self, message_id: int) -> None:
        """Move the agent marker forward; never moves it back."""
        if self.last_agent_marker is None or message_id > self.last_agent_marker:
            self.last_agent_marker = message_id
