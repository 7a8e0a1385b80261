"""
mpv driven over its JSON IPC socket.

``PlayerState`` is immutable. Control functions return the new state plus
whether mpv accepted the request; the caller owns the current state.
"""

import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional

from loguru import logger

from neubauten.core.config import PlayerConfig

MPV_FLAGS = (
    "--idle=yes",
    "--no-video",
    "--no-terminal",
    "--keep-open=yes",
    "--load-scripts=no",
)

STARTUP_TIMEOUT = 5.0
IPC_TIMEOUT = 2.0

# Position and eof reports are ignored this long after loadfile (seconds)
SETTLE_TIME = 3.0
# Shorter durations usually mean a broken tag; only eof is trusted then
SHORT_TRACK = 10.0


class PlayerState(NamedTuple):
    socket_path: Optional[str] = None
    process: Optional[subprocess.Popen] = None
    current_track: Optional[str] = None
    is_playing: bool = False
    started_at: Optional[float] = None  # time.time() of the last loadfile


class PlaybackProgress(NamedTuple):
    """One reading of mpv's time-pos, duration and eof-reached."""

    position: float
    duration: float
    eof: bool

    def finished(self) -> bool:
        if self.duration <= 0:
            return False
        if self.duration < SHORT_TRACK:
            return self.eof and self.position >= self.duration - 0.1
        if self.position >= self.duration - 0.5:
            return True
        return self.eof and self.position >= self.duration - 1.0


# -----------------------------------------------------------------------------
# Process
# -----------------------------------------------------------------------------


def check_mpv_available() -> bool:
    try:
        result = subprocess.run(
            ["mpv", "--version"], capture_output=True, text=True, timeout=5
        )
    except (subprocess.SubprocessError, OSError):
        return False
    return result.returncode == 0


def _socket_path(config: PlayerConfig) -> str:
    if config.mpv_socket_path:
        return config.mpv_socket_path
    return str(Path(tempfile.gettempdir()) / f"neubauten-mpv-{os.getpid()}")


def _wait_for_socket(socket_path: str, process: subprocess.Popen) -> bool:
    deadline = time.monotonic() + STARTUP_TIMEOUT
    while not os.path.exists(socket_path):
        if process.poll() is not None or time.monotonic() > deadline:
            return False
        time.sleep(0.1)
    return True


def start_mpv(config: PlayerConfig) -> Optional[PlayerState]:
    """
    Launch an idle mpv listening on an IPC socket.

    Returns:
        Initial state, or None if mpv could not be started or never answered
    """
    socket_path = _socket_path(config)
    logger.info(f"Starting mpv on {socket_path}")

    try:
        if os.path.exists(socket_path):
            os.unlink(socket_path)
        process = subprocess.Popen(
            [
                "mpv",
                *MPV_FLAGS,
                f"--input-ipc-server={socket_path}",
                f"--volume={config.volume}",
            ],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.SubprocessError, OSError) as e:
        logger.error(f"Failed to launch mpv: {e}")
        return None

    if not _wait_for_socket(socket_path, process):
        logger.error(f"mpv did not open {socket_path} within {STARTUP_TIMEOUT}s")
        process.kill()
        return None

    if not mpv_command(socket_path, "get_property", "idle-active"):
        logger.error("mpv socket exists but does not answer")
        process.kill()
        return None

    logger.info("mpv ready")
    return PlayerState(socket_path=socket_path, process=process)


def stop_mpv(state: PlayerState) -> None:
    if state.process:
        try:
            state.process.kill()
            state.process.wait(timeout=2.0)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"mpv already gone: {e}")

    if state.socket_path and os.path.exists(state.socket_path):
        try:
            os.unlink(state.socket_path)
        except OSError as e:
            logger.debug(f"Could not remove {state.socket_path}: {e}")


def is_mpv_running(state: PlayerState) -> bool:
    if state.process is None or state.process.poll() is not None:
        return False
    return bool(state.socket_path) and os.path.exists(state.socket_path)


# -----------------------------------------------------------------------------
# IPC
# -----------------------------------------------------------------------------


def _exchange(socket_path: str, args: tuple) -> Optional[dict[str, Any]]:
    """Send one request; return the reply line (the one carrying "error")."""
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.settimeout(IPC_TIMEOUT)
        sock.connect(socket_path)
        sock.sendall((json.dumps({"command": list(args)}) + "\n").encode("utf-8"))
        payload = sock.recv(4096).decode("utf-8")
    finally:
        sock.close()

    for line in payload.splitlines():
        try:
            message = json.loads(line)
        except json.JSONDecodeError:
            continue
        # Event lines have no "error" key
        if "error" in message:
            return message
    return None


def _call(socket_path: Optional[str], *args: Any) -> Optional[dict[str, Any]]:
    if not socket_path or not os.path.exists(socket_path):
        return None
    try:
        reply = _exchange(socket_path, args)
    except OSError as e:
        logger.debug(f"mpv {args[0]} failed: {e}")
        return None
    if reply is None or reply.get("error") != "success":
        return None
    return reply


def mpv_command(socket_path: Optional[str], *args: Any) -> bool:
    """Run an mpv command, e.g. ``mpv_command(path, "loadfile", f, "replace")``."""
    return _call(socket_path, *args) is not None


def mpv_property(socket_path: Optional[str], name: str) -> Any:
    reply = _call(socket_path, "get_property", name)
    return reply.get("data") if reply else None


# -----------------------------------------------------------------------------
# Playback
# -----------------------------------------------------------------------------


def play_file(state: PlayerState, local_path: str) -> tuple[PlayerState, bool]:
    if not is_mpv_running(state):
        return state, False

    if not mpv_command(state.socket_path, "loadfile", local_path, "replace"):
        logger.warning(f"mpv refused {local_path}")
        return state, False
    # A paused mpv stays paused across loadfile
    mpv_command(state.socket_path, "set_property", "pause", False)

    return (
        state._replace(current_track=local_path, is_playing=True, started_at=time.time()),
        True,
    )


def _set_pause(state: PlayerState, paused: bool) -> tuple[PlayerState, bool]:
    if not is_mpv_running(state):
        return state, False
    if not mpv_command(state.socket_path, "set_property", "pause", paused):
        return state, False
    return state._replace(is_playing=not paused), True


def pause_playback(state: PlayerState) -> tuple[PlayerState, bool]:
    return _set_pause(state, True)


def resume_playback(state: PlayerState) -> tuple[PlayerState, bool]:
    if not state.current_track:
        return state, False
    return _set_pause(state, False)


def read_progress(state: PlayerState) -> PlaybackProgress:
    return PlaybackProgress(
        position=mpv_property(state.socket_path, "time-pos") or 0.0,
        duration=mpv_property(state.socket_path, "duration") or 0.0,
        eof=mpv_property(state.socket_path, "eof-reached") is True,
    )


def is_track_finished(state: PlayerState) -> bool:
    """
    Whether the loaded track has played to its end.

    False while nothing is loaded, while mpv is down, and during the settle
    time after a loadfile when mpv may still report the previous track.
    """
    if not state.current_track or not is_mpv_running(state):
        return False
    if state.started_at is not None and time.time() - state.started_at < SETTLE_TIME:
        return False
    return read_progress(state).finished()
