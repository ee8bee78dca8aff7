"""HandoffController implementation.

Routes each user message to the automated responder or to a human agent
in the helpdesk, and merges agent replies back into the user's timeline
on every read.
"""

from collections.abc import Iterable
from typing import Protocol

from ..channel import ChannelError, ChannelUnavailable, IChannelClient
from ..config import DEFAULT_TRIGGERS
from ..logging_config import get_logger, user_context
from ..models import ConversationStatus, Origin, Session, SenderRole, TimelineEntry
from ..responder import IResponder
from ..storage import ISessionRegistry, ITimelineStore, KeyedLock
from .triggers import matches_trigger

logger = get_logger(__name__)

CONNECTING_TEXT = "Connecting you to a human agent..."
FORWARDED_TEXT = "Sent to human agent."
RESOLVED_TEXT = (
    "The agent has closed this conversation. "
    "You are now chatting with the automated assistant again."
)
AGENT_JOINED_TEXT = "Agent {name} has joined the conversation."
RESPONDER_ERROR_TEXT = "Sorry, something went wrong while generating a reply."


class IHandoffController(Protocol):
    """Decides per message between automated reply and human agent."""

    async def handle_user_message(self, user_id: str, text: str) -> TimelineEntry:
        """Record the message, route it, and return the resulting entry."""
        ...

    async def reconcile(self, user_id: str) -> int:
        """Merge new agent messages and status. Returns entries appended."""
        ...

    async def get_timeline(self, user_id: str) -> list[TimelineEntry]:
        """Reconcile, then return the user's timeline."""
        ...


class HandoffController:
    """Owns the session registry and timeline store."""

    def __init__(
        self,
        channel: IChannelClient,
        responder: IResponder,
        registry: ISessionRegistry,
        timeline: ITimelineStore,
        triggers: Iterable[str] = DEFAULT_TRIGGERS,
        contact_email_domain: str = "example.com",
    ):
        self._channel = channel
        self._responder = responder
        self._registry = registry
        self._timeline = timeline
        self._triggers = tuple(triggers)
        self._email_domain = contact_email_domain
        self._locks = KeyedLock()

    async def handle_user_message(self, user_id: str, text: str) -> TimelineEntry:
        """Record the message, route it, and return the resulting entry.

        Raises:
            ValueError: if user_id is empty.
            ChannelUnavailable: if forwarding to the helpdesk fails.
        """
        if not user_id:
            raise ValueError("user_id must not be empty")
        text = text or ""

        async with self._locks(user_id):
            logger.info(f"Message received from {user_id}: {text[:100]}")
            self._timeline.append(user_id, Origin.USER, text)

            session = self._registry.get_active(user_id)
            if session and await self._is_resolved(user_id, session):
                self._end_session(user_id)

            if self._registry.get_active(user_id):
                await self._forward(user_id, text)
                return self._timeline.append(user_id, Origin.SYSTEM, FORWARDED_TEXT)

            if matches_trigger(text, self._triggers):
                logger.info(f"Handoff requested by {user_id}")
                await self._forward(user_id, text)
                return self._timeline.append(user_id, Origin.SYSTEM, CONNECTING_TEXT)

            reply = await self._auto_reply(user_id, text)
            return self._timeline.append(user_id, Origin.ASSISTANT, reply)

    async def reconcile(self, user_id: str) -> int:
        """Merge new agent messages and status. Returns entries appended."""
        async with self._locks(user_id):
            return await self._reconcile(user_id)

    async def get_timeline(self, user_id: str) -> list[TimelineEntry]:
        """Reconcile, then return the user's timeline."""
        async with self._locks(user_id):
            await self._reconcile(user_id)
            return self._timeline.snapshot(user_id)

    def reset(self) -> None:
        """Forget all sessions and timelines."""
        self._registry.clear()
        self._timeline.clear()

    def tracked_users(self) -> int:
        """Number of user ids currently holding or awaiting a lock."""
        return len(self._locks)

    async def _reconcile(self, user_id: str) -> int:
        session = self._registry.get_active(user_id)
        if session is None:
            return 0

        appended = 0
        try:
            listed = await self._channel.list_messages(session.conversation_ref)
        except ChannelError as e:
            logger.warning(
                f"Message listing failed for {user_id}: {e}",
                extra=user_context(user_id, conversation_ref=session.conversation_ref),
            )
            listed = []

        marker = session.last_agent_marker
        fresh = sorted(
            (
                m
                for m in listed
                if m.sender_role == SenderRole.AGENT
                and (marker is None or m.id > marker)
            ),
            key=lambda m: m.id,
        )

        for message in fresh:
            name = message.sender_name
            if name and name != session.last_announced_agent_name:
                self._timeline.append(
                    user_id, Origin.SYSTEM, AGENT_JOINED_TEXT.format(name=name)
                )
                session.last_announced_agent_name = name
                appended += 1
            self._timeline.append(user_id, Origin.AGENT, message.content)
            appended += 1

        if fresh:
            session.advance_marker(fresh[-1].id)
            logger.debug(f"Merged {len(fresh)} agent messages for {user_id}")

        if await self._is_resolved(user_id, session):
            self._end_session(user_id)
            appended += 1

        return appended

    async def _is_resolved(self, user_id: str, session: Session) -> bool:
        # Status is best effort; an unknown status counts as not resolved
        try:
            status = await self._channel.get_status(session.conversation_ref)
        except ChannelError as e:
            logger.warning(
                f"Status check failed for {user_id}: {e}",
                extra=user_context(user_id, conversation_ref=session.conversation_ref),
            )
            return False
        return status == ConversationStatus.RESOLVED

    def _end_session(self, user_id: str) -> None:
        self._timeline.append(user_id, Origin.SYSTEM, RESOLVED_TEXT)
        self._registry.delete(user_id)
        logger.info(f"Conversation resolved for {user_id}, back to automated mode")

    async def _ensure_session(self, user_id: str) -> Session:
        session = self._registry.get(user_id)
        if session is None:
            contact_ref = await self._channel.find_or_create_contact(
                self._derived_key(user_id)
            )
            session = Session(contact_ref=contact_ref)

        if session.conversation_ref is None:
            conversation_ref = await self._channel.create_conversation(
                session.contact_ref
            )
            if not conversation_ref:
                raise ChannelUnavailable("Helpdesk returned no conversation reference")
            session.conversation_ref = conversation_ref
            session.last_agent_marker = None
            self._registry.put(user_id, session)
            logger.info(
                f"Opened conversation {conversation_ref} for {user_id}",
                extra=user_context(
                    user_id,
                    conversation_ref=conversation_ref,
                    contact_ref=session.contact_ref,
                ),
            )

        return session

    async def _forward(self, user_id: str, text: str) -> None:
        session = await self._ensure_session(user_id)
        await self._channel.post_message(session.conversation_ref, text)
        logger.debug(f"Forwarded message from {user_id} to {session.conversation_ref}")

    async def _auto_reply(self, user_id: str, text: str) -> str:
        try:
            return await self._responder.respond(text)
        except Exception as e:
            logger.error(f"Responder error for {user_id}: {e}", exc_info=True)
            return RESPONDER_ERROR_TEXT

    def _derived_key(self, user_id: str) -> str:
        return f"{user_id}@{self._email_domain}"
