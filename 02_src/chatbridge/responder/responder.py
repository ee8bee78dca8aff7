"""Automated responders used while no human agent is attached."""

from typing import Protocol

from ..logging_config import get_logger
from .llm_provider import ILLMProvider, LLMProvider

logger = get_logger(__name__)

SUPPORT_PROMPT = (
    "You are a friendly customer support assistant. Answer briefly. "
    "If the user wants to talk to a person, tell them to ask for a human agent."
)


class IResponder(Protocol):
    """Maps user text to an automated reply."""

    async def respond(self, text: str) -> str:
        """Generate a reply for the given text."""
        ...


class EchoResponder:
    """Canned responder that repeats the user's message."""

    async def respond(self, text: str) -> str:
        return f'AI: I heard you say "{text}"'


class LLMResponder:
    """Responder backed by an LLM provider."""

    def __init__(self, llm_provider: ILLMProvider, system: str = SUPPORT_PROMPT):
        self._llm = llm_provider
        self._system = system

    async def respond(self, text: str) -> str:
        """Ask the LLM for a single-turn reply."""
        return await self._llm.complete(
            messages=[{"role": "user", "content": text}],
            system=self._system,
        )


def create_responder(kind: str) -> IResponder:
    """Build the responder named by configuration ("echo" or "llm")."""
    if kind == "llm":
        logger.info("Using LLM responder")
        return LLMResponder(LLMProvider())
    if kind != "echo":
        logger.warning(f"Unknown responder {kind!r}, falling back to echo")
    return EchoResponder()
