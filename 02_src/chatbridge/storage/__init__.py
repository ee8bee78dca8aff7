"""In-memory stores for handoff state."""

from .locks import KeyedLock
from .registry import ISessionRegistry, SessionRegistry
from .timeline import ITimelineStore, TimelineStore

__all__ = [
    "KeyedLock",
    "ISessionRegistry",
    "SessionRegistry",
    "ITimelineStore",
    "TimelineStore",
]
