"""Chatwoot helpdesk client using the Application API."""

import time
from typing import Any, Protocol

import httpx

from ..config import ChannelSettings
from ..logging_config import get_logger
from ..models import ChannelMessage, ConversationStatus, SenderRole
from .errors import ChannelUnavailable, TransientLookupFailure

logger = get_logger(__name__)


class IChannelClient(Protocol):
    """Request/response access to the helpdesk. Holds no handoff state."""

    async def find_or_create_contact(self, derived_key: str) -> str:
        """Look up a contact by key, creating it on a miss. Returns contact ref."""
        ...

    async def create_conversation(self, contact_ref: str) -> str:
        """Open a conversation for a contact. Returns conversation ref."""
        ...

    async def post_message(self, conversation_ref: str, text: str) -> None:
        """Post text into the conversation as an incoming message."""
        ...

    async def list_messages(self, conversation_ref: str) -> list[ChannelMessage]:
        """List all messages in the conversation, in no particular order."""
        ...

    async def get_status(self, conversation_ref: str) -> ConversationStatus:
        """Get the conversation's current status."""
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...


def _extract_id(data: Any, *paths: tuple[str, ...]) -> str | None:
    """Return the first non-empty id found along the given key paths."""
    for path in paths:
        node = data
        for key in path:
            if not isinstance(node, dict):
                node = None
                break
            node = node.get(key)
        if node is not None and node != "":
            return str(node)
    return None


def _parse_sender_role(sender: dict) -> SenderRole:
    # Chatwoot reports helpdesk operators as sender type "user"
    sender_type = (sender.get("type") or "").lower()
    if sender_type == "user":
        return SenderRole.AGENT
    if sender_type == "contact":
        return SenderRole.CONTACT
    return SenderRole.OTHER


def parse_messages(payload: Any) -> list[ChannelMessage]:
    """Convert a Chatwoot message listing into ChannelMessages."""
    if isinstance(payload, dict):
        payload = payload.get("payload") or []
    if not isinstance(payload, list):
        return []

    messages = []
    for raw in payload:
        if not isinstance(raw, dict):
            continue
        msg_id = raw.get("id")
        if not isinstance(msg_id, int) or isinstance(msg_id, bool):
            continue
        sender = raw.get("sender") or {}
        messages.append(
            ChannelMessage(
                id=msg_id,
                sender_role=_parse_sender_role(sender),
                sender_name=sender.get("available_name") or sender.get("name"),
                content=raw.get("content") or "",
            )
        )
    return messages


class ChatwootClient:
    """Chatwoot Application API client."""

    def __init__(
        self,
        settings: ChannelSettings,
        client: httpx.AsyncClient | None = None,
    ):
        self._settings = settings
        self._client = client or httpx.AsyncClient(timeout=settings.timeout)
        self._base = f"{settings.base_url}/api/v1/accounts/{settings.account_id}"
        self._headers = {"api_access_token": settings.api_key}

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._client.request(
            method, f"{self._base}{path}", headers=self._headers, **kwargs
        )
        response.raise_for_status()
        return response.json()

    async def find_or_create_contact(self, derived_key: str) -> str:
        """Search contacts by email; create one if the search finds nothing."""
        try:
            data = await self._request(
                "GET", "/contacts/search", params={"q": derived_key}
            )
            found = data.get("payload") if isinstance(data, dict) else None
            if isinstance(found, list) and found:
                contact_ref = _extract_id(found[0], ("id",))
                if contact_ref:
                    logger.debug(f"Found contact {contact_ref} for {derived_key}")
                    return contact_ref
        except (httpx.HTTPError, ValueError) as e:
            # Lookup failures are treated as "not found"
            logger.warning(f"Contact search failed for {derived_key}: {e}")

        local_part = derived_key.split("@", 1)[0]
        body = {
            "inbox_id": self._settings.inbox_id,
            "name": f"User {local_part}",
            "email": derived_key,
            "identifier": f"{local_part}_{int(time.time() * 1000)}",
        }
        try:
            data = await self._request("POST", "/contacts", json=body)
        except (httpx.HTTPError, ValueError) as e:
            raise ChannelUnavailable(f"Contact creation failed: {e}") from e

        contact_ref = _extract_id(
            data, ("payload", "contact", "id"), ("payload", "id"), ("id",)
        )
        if not contact_ref:
            raise ChannelUnavailable("Contact creation returned no contact id")

        logger.info(f"Created contact {contact_ref} for {derived_key}")
        return contact_ref

    async def create_conversation(self, contact_ref: str) -> str:
        """Create a conversation in the configured inbox."""
        body = {"contact_id": contact_ref, "inbox_id": self._settings.inbox_id}
        try:
            data = await self._request("POST", "/conversations", json=body)
        except (httpx.HTTPError, ValueError) as e:
            raise ChannelUnavailable(f"Conversation creation failed: {e}") from e

        conversation_ref = _extract_id(data, ("id",), ("payload", "id"))
        if not conversation_ref:
            raise ChannelUnavailable(
                "Conversation creation returned no conversation id"
            )

        logger.info(f"Created conversation {conversation_ref} for contact {contact_ref}")
        return conversation_ref

    async def post_message(self, conversation_ref: str, text: str) -> None:
        """Post an incoming message on behalf of the contact."""
        body = {"content": text, "message_type": "incoming"}
        try:
            await self._request(
                "POST", f"/conversations/{conversation_ref}/messages", json=body
            )
        except (httpx.HTTPError, ValueError) as e:
            raise ChannelUnavailable(f"Message post failed: {e}") from e

    async def list_messages(self, conversation_ref: str) -> list[ChannelMessage]:
        """List messages in a conversation."""
        try:
            data = await self._request(
                "GET", f"/conversations/{conversation_ref}/messages"
            )
        except (httpx.HTTPError, ValueError) as e:
            raise TransientLookupFailure(f"Message listing failed: {e}") from e

        messages = parse_messages(data)
        logger.debug(
            f"Listed {len(messages)} messages for conversation {conversation_ref}"
        )
        return messages

    async def get_status(self, conversation_ref: str) -> ConversationStatus:
        """Get conversation status."""
        try:
            data = await self._request("GET", f"/conversations/{conversation_ref}")
        except (httpx.HTTPError, ValueError) as e:
            raise TransientLookupFailure(f"Status check failed: {e}") from e

        raw = data.get("status") if isinstance(data, dict) else None
        return ConversationStatus.parse(raw)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
