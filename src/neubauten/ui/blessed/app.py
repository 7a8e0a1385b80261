"""Main event loop and entry point for blessed UI."""

import queue
from typing import Optional

from blessed import Terminal
from loguru import logger

from neubauten.core.config import Config
from neubauten.domain.session.base import Session, SessionEvent

from .components import (
    calculate_layout,
    format_command_line,
    format_status_line,
    render_command_bar,
    render_status_bar,
)
from .events.actions import NOOP, Action
from .events.command_parser import ParseStatus
from .events.executor import apply_action
from .events.keys import parse_key
from .events.notifications import poll_notification
from .helpers.terminal import BlessedSurface, KeySource, RenderSurface
from .state import SessionState, create_initial_state


def next_action(
    state: SessionState,
    keys: KeySource,
    events: "queue.Queue[SessionEvent]",
    timeout: float,
) -> Optional[Action]:
    """
    Wait for the next thing to do.

    Session notifications are checked first and never block; only when none
    is pending is the keyboard polled, for at most ``timeout`` seconds.

    Returns:
        The resolved action, Noop for a key that did not resolve one (the
        command line still needs redrawing), or None if nothing happened
    """
    action = poll_notification(events)
    if action is not None:
        return action

    key = keys.inkey(timeout=timeout)
    if not key:
        return None

    result = state.parser.handle_input(parse_key(key))
    if result.status is ParseStatus.RESOLVED:
        return result.action
    return NOOP


def render(surface: RenderSurface, state: SessionState, config: Config) -> None:
    """Full redraw: current list, status line, command line."""
    layout = calculate_layout(surface)
    state.list_height = layout["list_height"]
    state.width = layout["width"]

    surface.clear()

    listing = state.views.current.listing
    listing.resize(layout["list_height"], layout["width"])
    listing.render(surface, 0, layout["list_y"], reset_cursor=state.reset_cursor)
    state.reset_cursor = False

    now_playing = state.now_playing
    status = format_status_line(
        now_playing.track if now_playing else None,
        state.is_paused,
        len(state.queue),
        show_durations=config.ui.show_durations,
    )
    render_status_bar(surface, layout["status_y"], layout["width"], status)

    command = format_command_line(state.parser, listing.filter)
    render_command_bar(surface, layout["command_y"], layout["width"], command)

    surface.present()


def main_loop(
    surface: RenderSurface, keys: KeySource, session: Session, config: Config
) -> SessionState:
    """
    Run until a Quit action.

    Args:
        surface: Where frames are drawn
        keys: Keystroke source polled with a bounded wait
        session: Playback session (its event queue is polled every iteration)
        config: Application configuration

    Returns:
        Final loop state
    """
    state = create_initial_state(session, calculate_layout(surface))
    timeout = config.ui.poll_timeout_ms / 1000

    render(surface, state, config)
    last_size = (surface.width, surface.height)

    while state.running:
        action = next_action(state, keys, session.events, timeout)

        size = (surface.width, surface.height)
        if action is None and size == last_size:
            continue

        if action is not None:
            apply_action(state, action, session)

        if state.running:
            render(surface, state, config)
        last_size = size

    logger.info("UI loop finished")
    return state


def run_interactive_ui(session: Session, config: Config) -> Optional[SessionState]:
    """
    Run the interactive UI in a fullscreen terminal.

    Args:
        session: Started playback session
        config: Application configuration

    Returns:
        Final loop state, or None if interrupted with Ctrl+C
    """
    term = Terminal()
    surface = BlessedSurface(term)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            return main_loop(surface, surface, session, config)
        except KeyboardInterrupt:
            logger.info("Ctrl+C detected - leaving UI")
            return None
