"""External helpdesk channel module."""

from .client import ChatwootClient, IChannelClient
from .errors import ChannelError, ChannelUnavailable, TransientLookupFailure

__all__ = [
    "IChannelClient",
    "ChatwootClient",
    "ChannelError",
    "ChannelUnavailable",
    "TransientLookupFailure",
]
