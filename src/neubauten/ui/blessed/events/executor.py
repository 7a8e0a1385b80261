"""Action execution: applies resolved actions to the view stack and playback state."""

from typing import Callable

from loguru import logger

from neubauten.domain.session.base import Session

from ..components.filterable_list import FilterableList
from ..state import NowPlaying, SessionState
from ..views import SearchView, TrackView
from .actions import Action, ActionKind

# Handler signature: (state, action, session) -> None
ActionHandler = Callable[[SessionState, Action, Session], None]


def _new_listing(state: SessionState, items) -> FilterableList:
    return FilterableList(items, state.list_height, state.width)


def _play(state: SessionState, session: Session, entry: NowPlaying) -> bool:
    if not session.play_track(entry.track):
        logger.warning(f"Playback failed: {entry.track}")
        state.now_playing = None
        state.is_paused = False
        return False

    logger.info(f"Playing {entry.track} ({entry.container} #{entry.track_index})")
    state.now_playing = entry
    state.is_paused = False
    return True


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------


def _handle_select(state: SessionState, action: Action, session: Session) -> None:
    view = state.views.current
    if view.listing.is_empty():
        return

    index = view.listing.selected_index()
    if not view.is_leaf:
        playlist = session.playlist(index)
        if playlist is None:
            logger.warning(f"Session has no playlist #{index}")
            return
        tracks = session.tracks(playlist)
        state.views.push(TrackView(index, playlist, _new_listing(state, tracks)))
        state.reset_cursor = True
        return

    _play(state, session, NowPlaying(view.listing.selected_item(), view.container, index))


def _handle_play_next(state: SessionState, action: Action, session: Session) -> None:
    """Queued tracks first, then the next track of whatever played last."""
    if state.queue:
        _play(state, session, state.queue.popleft())
        return

    current = state.now_playing
    if current is None:
        return

    next_index = current.track_index + 1
    track = session.track(current.container, next_index)
    if track is None:
        logger.info(f"Reached the end of {current.container}")
        state.now_playing = None
        state.is_paused = False
        return

    _play(state, session, NowPlaying(track, current.container, next_index))


def _handle_queue(state: SessionState, action: Action, session: Session) -> None:
    view = state.views.current
    if not view.is_leaf or view.listing.is_empty():
        return

    entry = NowPlaying(
        view.listing.selected_item(), view.container, view.listing.selected_index()
    )
    state.queue.append(entry)
    logger.debug(f"Queued {entry.track} ({len(state.queue)} in queue)")


def _handle_toggle_playback(
    state: SessionState, action: Action, session: Session
) -> None:
    if state.now_playing is None:
        return

    if session.is_playing():
        if session.pause():
            state.is_paused = True
    elif session.resume():
        state.is_paused = False


def _handle_filter(state: SessionState, action: Action, session: Session) -> None:
    state.views.current.listing.set_filter(action.argument)


def _handle_search(state: SessionState, action: Action, session: Session) -> None:
    query = action.argument or ""
    result = session.search(query)
    view = SearchView(result, _new_listing(state, result.tracks))
    state.views.push(view)
    view.listing.set_filter(query)
    state.reset_cursor = True


def _handle_back(state: SessionState, action: Action, session: Session) -> None:
    state.views.back()


def _handle_quit(state: SessionState, action: Action, session: Session) -> None:
    state.running = False


def _handle_move(state: SessionState, action: Action, session: Session) -> None:
    listing = state.views.current.listing
    if action.kind is ActionKind.MOVE_UP:
        listing.move_up()
    elif action.kind is ActionKind.MOVE_DOWN:
        listing.move_down()
    elif action.kind is ActionKind.MOVE_TOP:
        listing.move_top()
    elif action.kind is ActionKind.MOVE_BOTTOM:
        listing.move_bottom()


ACTION_HANDLERS: dict[ActionKind, ActionHandler] = {
    ActionKind.SELECT: _handle_select,
    ActionKind.PLAY_NEXT_TRACK: _handle_play_next,
    ActionKind.QUEUE_TRACK: _handle_queue,
    ActionKind.TOGGLE_PLAYBACK: _handle_toggle_playback,
    ActionKind.MOVE_UP: _handle_move,
    ActionKind.MOVE_DOWN: _handle_move,
    ActionKind.MOVE_TOP: _handle_move,
    ActionKind.MOVE_BOTTOM: _handle_move,
    ActionKind.BACK: _handle_back,
    ActionKind.QUIT: _handle_quit,
    ActionKind.FILTER_LIST: _handle_filter,
    ActionKind.SEARCH_TRACK: _handle_search,
}


def apply_action(state: SessionState, action: Action, session: Session) -> SessionState:
    """
    Apply one action to the loop state.

    Unhandled combinations (e.g. queueing from the playlist view) are no-ops.

    Args:
        state: Loop state, mutated in place
        action: Resolved action
        session: Playback session

    Returns:
        The same state, for chaining
    """
    handler = ACTION_HANDLERS.get(action.kind)
    if handler is None:
        return state

    logger.debug(f"Action: {action}")
    handler(state, action, session)
    return state
