"""Tests for handoff trigger detection."""

import pytest

from chatbridge.config import parse_triggers
from chatbridge.handoff import matches_trigger


@pytest.mark.parametrize(
    "text",
    [
        "I need a human",
        "HUMAN",
        "can I talk to an agent?",
        "Operator please",
        "let me speak to a Real Person",
    ],
)
def test_matches_default_vocabulary(text):
    """Test that default trigger phrases match regardless of case."""
    assert matches_trigger(text) is True


@pytest.mark.parametrize("text", ["hello", "", "what are your hours?"])
def test_ordinary_text_does_not_match(text):
    """Test that ordinary text is not a trigger."""
    assert matches_trigger(text) is False


def test_custom_phrases():
    """Test matching against a custom vocabulary."""
    assert matches_trigger("Need SUPPORT staff", ("support staff",)) is True
    assert matches_trigger("human", ("support staff",)) is False


def test_parse_triggers():
    """Test parsing of the HANDOFF_TRIGGERS setting."""
    assert parse_triggers("Human, Live Chat ,") == ("human", "live chat")
    assert parse_triggers("") == parse_triggers(None)
    assert parse_triggers(" , ") == parse_triggers(None)
