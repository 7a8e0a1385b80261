"""Asynchronous session notifications mapped onto actions."""

import queue
from typing import Optional

from loguru import logger

from neubauten.domain.session.base import END_OF_TRACK, SessionEvent

from .actions import NOOP, Action, ActionKind


def poll_notification(events: "queue.Queue[SessionEvent]") -> Optional[Action]:
    """
    Take one pending notification without blocking.

    Returns:
        PlayNextTrack for an end-of-track event, Noop for any other event,
        or None when nothing is pending
    """
    try:
        event = events.get_nowait()
    except queue.Empty:
        return None

    if event.kind == END_OF_TRACK:
        return Action(ActionKind.PLAY_NEXT_TRACK)

    logger.debug(f"Ignoring session event {event.kind}: {event.data}")
    return NOOP
