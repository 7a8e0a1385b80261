"""Session loop state, owned by the loop and mutated between poll and render."""

from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from neubauten.domain.library.models import Track
from neubauten.domain.session.base import Container, Session

from .components.filterable_list import FilterableList
from .events.command_parser import CommandParser
from .views import PlaylistView, ViewStack


@dataclass
class NowPlaying:
    """A track plus where it came from, so the next one can be found."""

    track: Track
    container: Container
    track_index: int


@dataclass
class SessionState:
    views: ViewStack
    parser: CommandParser = field(default_factory=CommandParser)
    queue: deque[NowPlaying] = field(default_factory=deque)
    now_playing: Optional[NowPlaying] = None
    is_paused: bool = False
    running: bool = True
    reset_cursor: bool = False

    # Viewport for lists built by actions
    list_height: int = 1
    width: int = 80


def create_initial_state(session: Session, layout: dict[str, int]) -> SessionState:
    """Build the state with the playlist view at the bottom of the stack."""
    listing = FilterableList(session.playlists(), layout["list_height"], layout["width"])
    return SessionState(
        views=ViewStack(PlaylistView(listing)),
        list_height=layout["list_height"],
        width=layout["width"],
    )
