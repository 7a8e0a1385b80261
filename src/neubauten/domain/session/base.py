"""Session interface consumed by the terminal UI.

A session provides the playlist hierarchy, plays tracks and reports
asynchronous playback notifications through a thread-safe queue.
"""

import queue
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union

from neubauten.domain.library.models import Playlist, SearchResult, Track

# Notification kinds posted to Session.events
READY = "ready"
END_OF_TRACK = "end_of_track"
PLAYBACK_ERROR = "playback_error"

# Anything whose tracks can be enumerated and walked by index
Container = Union[Playlist, SearchResult]


@dataclass(frozen=True)
class SessionEvent:
    """Out-of-band notification from the session's background thread."""

    kind: str
    data: dict[str, Any] = field(default_factory=dict)


class SessionError(Exception):
    """Raised when a session cannot be started."""


class Session(Protocol):
    """Capabilities the UI needs from a playback session."""

    events: "queue.Queue[SessionEvent]"

    def playlists(self) -> list[Playlist]: ...

    def playlist(self, index: int) -> Optional[Playlist]: ...

    def tracks(self, container: Container) -> list[Track]: ...

    def track(self, container: Container, index: int) -> Optional[Track]: ...

    def search(self, query: str) -> SearchResult: ...

    def play_track(self, track: Track) -> bool: ...

    def pause(self) -> bool: ...

    def resume(self) -> bool: ...

    def is_playing(self) -> bool: ...

    def close(self) -> None: ...
