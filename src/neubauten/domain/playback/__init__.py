"""Playback domain - mpv over JSON IPC.

This domain handles:
- Starting and stopping the mpv process
- Play, pause and resume requests
- End-of-track detection
"""

from .player import (
    PlaybackProgress,
    PlayerState,
    check_mpv_available,
    is_mpv_running,
    is_track_finished,
    mpv_command,
    mpv_property,
    pause_playback,
    play_file,
    read_progress,
    resume_playback,
    start_mpv,
    stop_mpv,
)

__all__ = [
    "PlaybackProgress",
    "PlayerState",
    "check_mpv_available",
    "is_mpv_running",
    "is_track_finished",
    "mpv_command",
    "mpv_property",
    "pause_playback",
    "play_file",
    "read_progress",
    "resume_playback",
    "start_mpv",
    "stop_mpv",
]
