"""Timeline store implementation."""

from typing import Protocol

from ..models import Origin, TimelineEntry


class ITimelineStore(Protocol):
    """Append-only per-user log of timeline entries."""

    def append(self, user_id: str, origin: Origin, text: str) -> TimelineEntry:
        """Append an entry and return it."""
        ...

    def snapshot(self, user_id: str) -> list[TimelineEntry]:
        """Get a copy of the user's timeline."""
        ...

    def clear(self) -> None:
        """Remove all timelines."""
        ...


class TimelineStore:
    """Process-local timeline store."""

    def __init__(self):
        self._timelines: dict[str, list[TimelineEntry]] = {}

    def append(self, user_id: str, origin: Origin, text: str) -> TimelineEntry:
        """Append an entry and return it."""
        entry = TimelineEntry(origin=origin, text=text)
        self._timelines.setdefault(user_id, []).append(entry)
        return entry

    def snapshot(self, user_id: str) -> list[TimelineEntry]:
        """Get a copy of the user's timeline."""
        return list(self._timelines.get(user_id, []))

    def clear(self) -> None:
        """Remove all timelines."""
        self._timelines.clear()

    def __contains__(self, user_id: str) -> bool:
        return user_id in self._timelines
