"""Handoff trigger detection."""

from collections.abc import Iterable

from ..config import DEFAULT_TRIGGERS


def matches_trigger(text: str, phrases: Iterable[str] = DEFAULT_TRIGGERS) -> bool:
    """True if any trigger phrase occurs in text, ignoring case."""
    lowered = (text or "").casefold()
    return any(phrase.casefold() in lowered for phrase in phrases if phrase)
