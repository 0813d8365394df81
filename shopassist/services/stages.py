"""Enumerations describing the assistant session lifecycle."""

from enum import Enum


class SessionState(str, Enum):
    """Finite states of an :class:`~shopassist.services.assistant.AssistantSession`."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
