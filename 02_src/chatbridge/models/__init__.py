"""Core data models for chatbridge."""

from .channel import ChannelMessage, ConversationStatus, SenderRole
from .session import Session
from .timeline import Origin, TimelineEntry

__all__ = [
    # Session
    "Session",
    # Timeline
    "Origin",
    "TimelineEntry",
    # Channel
    "ChannelMessage",
    "ConversationStatus",
    "SenderRole",
]
