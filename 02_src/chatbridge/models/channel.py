"""Models for data read from the external helpdesk."""

from dataclasses import dataclass
from enum import Enum


class ConversationStatus(str, Enum):
    """Conversation status as reported by the helpdesk."""

    OPEN = "open"
    RESOLVED = "resolved"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str | None) -> "ConversationStatus":
        if raw == cls.OPEN.value:
            return cls.OPEN
        if raw == cls.RESOLVED.value:
            return cls.RESOLVED
        return cls.OTHER


class SenderRole(str, Enum):
    """Author of a helpdesk message."""

    AGENT = "agent"
    CONTACT = "contact"
    OTHER = "other"


@dataclass(frozen=True)
class ChannelMessage:
    """A message listed from a helpdesk conversation."""

    id: int
    sender_role: SenderRole
    sender_name: str | None
    content: str
