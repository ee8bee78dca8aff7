"""Automated responder module."""

from .llm_provider import ILLMProvider, LLMProvider
from .responder import EchoResponder, IResponder, LLMResponder, create_responder

__all__ = [
    "ILLMProvider",
    "LLMProvider",
    "IResponder",
    "EchoResponder",
    "LLMResponder",
    "create_responder",
]
