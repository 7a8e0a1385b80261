"""Session domain - the playlist hierarchy, playback and notifications."""

from .base import (
    END_OF_TRACK,
    PLAYBACK_ERROR,
    READY,
    Container,
    Session,
    SessionError,
    SessionEvent,
)
from .local import LocalSession

__all__ = [
    "END_OF_TRACK",
    "PLAYBACK_ERROR",
    "READY",
    "Container",
    "LocalSession",
    "Session",
    "SessionError",
    "SessionEvent",
]
