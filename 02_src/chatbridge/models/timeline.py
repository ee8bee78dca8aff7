"""Timeline data models."""

from dataclasses import dataclass
from enum import Enum


class Origin(str, Enum):
    """Who produced a timeline entry."""

    USER = "user"
    ASSISTANT = "assistant"
    AGENT = "agent"
    SYSTEM = "system"


@dataclass(frozen=True)
class TimelineEntry:
    """A single entry shown to the user."""

    origin: Origin
    text: str

    def to_dict(self) -> dict:
        return {"from": self.origin.value, "text": self.text}
