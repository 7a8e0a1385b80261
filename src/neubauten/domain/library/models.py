"""
Music library domain models.

Every model renders as a single line of text through ``str()``, which is what
the list views display and filter against.
"""

from pathlib import Path
from typing import NamedTuple, Optional


class Track(NamedTuple):
    """A playable track referenced by a playlist."""

    local_path: str
    title: Optional[str] = None
    artist: Optional[str] = None
    duration: Optional[float] = None  # in seconds

    def __str__(self) -> str:
        if self.artist and self.title:
            return f"{self.artist} - {self.title}"
        if self.title:
            return self.title
        if self.local_path:
            return Path(self.local_path).stem
        return "<Unknown Track>"


class Playlist(NamedTuple):
    """A playlist file; its tracks are loaded on demand by the session."""

    name: str
    local_path: Optional[str] = None

    def __str__(self) -> str:
        return self.name


class SearchResult(NamedTuple):
    """Tracks a search query runs over."""

    query: str
    tracks: tuple[Track, ...] = ()

    def __str__(self) -> str:
        return f"Search: {self.query}"
