"""Helpdesk channel errors."""


class ChannelError(Exception):
    """Base class for helpdesk channel failures."""


class ChannelUnavailable(ChannelError):
    """A state-creating call failed or returned an unusable payload."""


class TransientLookupFailure(ChannelError):
    """A best-effort read failed; callers treat it as no new information."""
