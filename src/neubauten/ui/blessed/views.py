"""Views and the view stack.

Each view owns one FilterableList plus the context it was reached from.
The stack owns the views; popping a view drops its list with it.
"""

from dataclasses import dataclass
from typing import Optional, Union

from neubauten.domain.library.models import Playlist, SearchResult, Track
from neubauten.domain.session.base import Container

from .components.filterable_list import FilterableList


@dataclass
class PlaylistView:
    """Top level: every playlist."""

    listing: FilterableList[Playlist]

    is_leaf = False

    @property
    def container(self) -> Optional[Container]:
        return None


@dataclass
class TrackView:
    """Tracks of one playlist, reached by selecting it."""

    playlist_index: int
    playlist: Playlist
    listing: FilterableList[Track]

    is_leaf = True

    @property
    def container(self) -> Optional[Container]:
        return self.playlist


@dataclass
class SearchView:
    """Tracks of a search result."""

    search: SearchResult
    listing: FilterableList[Track]

    is_leaf = True

    @property
    def container(self) -> Optional[Container]:
        return self.search


View = Union[PlaylistView, TrackView, SearchView]


class ViewStack:
    """Ordered views, last is current. The bottom view is never popped."""

    def __init__(self, root: View) -> None:
        self._views: list[View] = [root]

    def __len__(self) -> int:
        return len(self._views)

    @property
    def depth(self) -> int:
        return len(self._views)

    @property
    def current(self) -> View:
        return self._views[-1]

    def push(self, view: View) -> None:
        view.listing.clear_filter()
        self._views.append(view)

    def back(self) -> None:
        """
        Clear the current filter if one is active, otherwise pop.

        The revealed view comes back unfiltered. Returning from a playlist's
        tracks puts the cursor back on that playlist.
        """
        listing = self.current.listing
        if listing.has_filter():
            listing.clear_filter()
            return
        if len(self._views) == 1:
            return

        popped = self._views.pop()
        revealed = self.current.listing
        if revealed.has_filter():
            revealed.clear_filter()
        if isinstance(popped, TrackView):
            revealed.move_to(popped.playlist_index)
