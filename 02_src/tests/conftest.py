"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chatbridge.channel import ChannelUnavailable, TransientLookupFailure  # noqa: E402
from chatbridge.models import (  # noqa: E402
    ChannelMessage,
    ConversationStatus,
    SenderRole,
)


class FakeChannel:
    """Scripted in-memory stand-in for the helpdesk."""

    def __init__(self):
        self.contacts: dict[str, str] = {}
        self.statuses: dict[str, ConversationStatus] = {}
        self.messages: dict[str, list[ChannelMessage]] = {}
        self.posted: list[tuple[str, str]] = []
        self.contact_lookups: list[str] = []
        self.conversations_created: list[str] = []
        self.status_checks = 0
        self.closed = False

        # Failure switches
        self.fail_status = False
        self.fail_listing = False
        self.fail_post = False
        self.fail_contact = False
        self.empty_conversation_ref = False
        self.latency = 0.0  # seconds each state-creating call takes

        self._next_contact = 100
        self._next_conversation = 1

    async def find_or_create_contact(self, derived_key: str) -> str:
        self.contact_lookups.append(derived_key)
        await asyncio.sleep(self.latency)
        if self.fail_contact:
            raise ChannelUnavailable("contact creation failed")
        if derived_key not in self.contacts:
            self.contacts[derived_key] = f"contact-{self._next_contact}"
            self._next_contact += 1
        return self.contacts[derived_key]

    async def create_conversation(self, contact_ref: str) -> str:
        await asyncio.sleep(self.latency)
        if self.empty_conversation_ref:
            return ""
        ref = f"conv-{self._next_conversation}"
        self._next_conversation += 1
        self.conversations_created.append(ref)
        self.statuses[ref] = ConversationStatus.OPEN
        self.messages[ref] = []
        return ref

    async def post_message(self, conversation_ref: str, text: str) -> None:
        if self.fail_post:
            raise ChannelUnavailable("post failed")
        self.posted.append((conversation_ref, text))
        self.messages[conversation_ref].append(
            ChannelMessage(
                id=1000 + len(self.posted),
                sender_role=SenderRole.CONTACT,
                sender_name="User",
                content=text,
            )
        )

    async def list_messages(self, conversation_ref: str) -> list[ChannelMessage]:
        if self.fail_listing:
            raise TransientLookupFailure("listing failed")
        return list(self.messages.get(conversation_ref, []))

    async def get_status(self, conversation_ref: str) -> ConversationStatus:
        self.status_checks += 1
        if self.fail_status:
            raise TransientLookupFailure("status failed")
        return self.statuses.get(conversation_ref, ConversationStatus.OTHER)

    async def close(self) -> None:
        self.closed = True

    # Helpers for tests
    def add_agent_message(
        self, conversation_ref: str, msg_id: int, name: str | None, content: str
    ) -> None:
        self.messages[conversation_ref].append(
            ChannelMessage(
                id=msg_id,
                sender_role=SenderRole.AGENT,
                sender_name=name,
                content=content,
            )
        )

    def resolve(self, conversation_ref: str) -> None:
        self.statuses[conversation_ref] = ConversationStatus.RESOLVED


@pytest.fixture
def channel():
    """Create a fake helpdesk channel."""
    return FakeChannel()


@pytest.fixture
def mock_responder():
    """Create mock automated responder."""
    responder = Mock()
    responder.respond = AsyncMock(return_value="Test response")
    return responder


@pytest.fixture
def registry():
    """Create empty session registry."""
    from chatbridge.storage import SessionRegistry

    return SessionRegistry()


@pytest.fixture
def timeline():
    """Create empty timeline store."""
    from chatbridge.storage import TimelineStore

    return TimelineStore()


@pytest.fixture
def controller(channel, mock_responder, registry, timeline):
    """Create HandoffController wired to the fake channel."""
    from chatbridge.handoff import HandoffController

    return HandoffController(
        channel=channel,
        responder=mock_responder,
        registry=registry,
        timeline=timeline,
    )
