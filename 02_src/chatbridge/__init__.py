"""chatbridge: chat service with AI and human agent handoff."""

from .app import Application, IApplication
from .channel import (
    ChannelError,
    ChannelUnavailable,
    ChatwootClient,
    IChannelClient,
    TransientLookupFailure,
)
from .config import ChannelSettings, Settings
from .handoff import HandoffController, IHandoffController
from .models import (
    ChannelMessage,
    ConversationStatus,
    Origin,
    SenderRole,
    Session,
    TimelineEntry,
)
from .responder import EchoResponder, IResponder, LLMResponder
from .storage import SessionRegistry, TimelineStore

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Config
    "Settings",
    "ChannelSettings",
    # Models
    "Session",
    "Origin",
    "TimelineEntry",
    "ChannelMessage",
    "ConversationStatus",
    "SenderRole",
    # Components
    "IChannelClient",
    "ChatwootClient",
    "ChannelError",
    "ChannelUnavailable",
    "TransientLookupFailure",
    "IResponder",
    "EchoResponder",
    "LLMResponder",
    "SessionRegistry",
    "TimelineStore",
    "IHandoffController",
    "HandoffController",
]
