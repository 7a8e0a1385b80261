"""Now-playing status line."""

from typing import Optional

from neubauten.domain.library.models import Track

from ..helpers.terminal import RenderSurface
from ..styles.formatting import format_time, pad_line
from ..styles.palette import STYLE_STATUS


def format_status_line(
    track: Optional[Track],
    is_paused: bool,
    queue_length: int,
    show_durations: bool = True,
) -> str:
    """
    Build the status text, e.g. ``Playback: Artist - Title [3:07] | Queue: 2``.

    Args:
        track: Track currently playing, or None
        is_paused: Whether playback is paused
        queue_length: Number of queued tracks
        show_durations: Append the track length when known

    Returns:
        Status text without padding
    """
    if track is None:
        text = "Playback: -"
    else:
        text = f"Playback: {track}"
        if show_durations and track.duration:
            text += f" [{format_time(track.duration)}]"
        if is_paused:
            text += " [paused]"

    if queue_length:
        text += f" | Queue: {queue_length}"

    return text


def render_status_bar(surface: RenderSurface, y: int, width: int, text: str) -> None:
    surface.draw_text(0, y, STYLE_STATUS, pad_line(text, width))
