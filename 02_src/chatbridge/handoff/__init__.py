"""Handoff module."""

from .controller import HandoffController, IHandoffController
from .triggers import matches_trigger

__all__ = ["HandoffController", "IHandoffController", "matches_trigger"]
