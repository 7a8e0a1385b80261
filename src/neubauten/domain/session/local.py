"""
Local session: M3U playlists on disk played through mpv.

The mpv player state is shared between the UI thread (play/pause requests)
and a background watcher thread that detects the end of a track, so every
access to it goes through ``self._lock``.
"""

import queue
import threading
from pathlib import Path
from typing import Optional

from loguru import logger

from neubauten.core.config import Config
from neubauten.domain.library.metadata import extract_track_metadata
from neubauten.domain.library.models import Playlist, SearchResult, Track
from neubauten.domain.playback.player import (
    PlayerState,
    check_mpv_available,
    is_track_finished,
    pause_playback,
    play_file,
    resume_playback,
    start_mpv,
    stop_mpv,
)
from neubauten.domain.playlists.m3u import (
    list_playlist_files,
    read_m3u,
    resolve_track_path,
)

from .base import (
    END_OF_TRACK,
    PLAYBACK_ERROR,
    READY,
    Container,
    SessionError,
    SessionEvent,
)


class LocalSession:
    """Session over a directory of playlists, backed by an mpv process."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.events: "queue.Queue[SessionEvent]" = queue.Queue()

        self._playlists_dir = Path(config.library.playlists_dir).expanduser()
        self._library_root = Path(config.library.library_root).expanduser()
        self._playlists: list[Playlist] = []
        self._track_cache: dict[str, list[Track]] = {}
        self._metadata_cache: dict[str, Track] = {}

        self._lock = threading.Lock()
        self._player = PlayerState()
        self._end_reported = True
        self._stop = threading.Event()
        self._watcher: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start mpv, scan playlists and begin watching for track ends.

        Raises:
            SessionError: If mpv is missing or fails to start
        """
        if not check_mpv_available():
            raise SessionError("mpv is not installed or not on PATH")

        player = start_mpv(self.config.player)
        if player is None:
            raise SessionError("Failed to start mpv (see log for details)")

        with self._lock:
            self._player = player

        self.refresh_playlists()

        self._stop.clear()
        self._watcher = threading.Thread(
            target=self._watch_playback,
            daemon=True,
            name="PlaybackWatcherThread",
        )
        self._watcher.start()

        self.events.put(SessionEvent(READY, {"playlists": len(self._playlists)}))

    def close(self) -> None:
        """Stop the watcher thread and the mpv process."""
        self._stop.set()
        if self._watcher is not None:
            self._watcher.join(timeout=2.0)
            self._watcher = None

        with self._lock:
            stop_mpv(self._player)
            self._player = PlayerState()

        logger.info("Local session closed")

    def refresh_playlists(self) -> list[Playlist]:
        """Rescan the playlists directory."""
        self._playlists = [
            Playlist(name=path.stem, local_path=str(path))
            for path in list_playlist_files(self._playlists_dir)
        ]
        self._track_cache.clear()
        logger.info(
            f"Found {len(self._playlists)} playlists in {self._playlists_dir}"
        )
        return self._playlists

    # ------------------------------------------------------------------
    # Library
    # ------------------------------------------------------------------

    def playlists(self) -> list[Playlist]:
        return list(self._playlists)

    def playlist(self, index: int) -> Optional[Playlist]:
        if 0 <= index < len(self._playlists):
            return self._playlists[index]
        return None

    def tracks(self, container: Container) -> list[Track]:
        """Enumerate the tracks of a playlist or search result."""
        if isinstance(container, SearchResult):
            return list(container.tracks)

        if container.local_path is None:
            return []

        cached = self._track_cache.get(container.local_path)
        if cached is not None:
            return list(cached)

        playlist_path = Path(container.local_path)
        try:
            entries = read_m3u(playlist_path)
        except (FileNotFoundError, OSError) as e:
            logger.warning(f"Could not read playlist {playlist_path}: {e}")
            return []

        tracks = []
        for entry in entries:
            resolved = resolve_track_path(playlist_path, entry, self._library_root)
            if resolved is None:
                logger.debug(f"Unresolved entry in {playlist_path.name}: {entry}")
                continue
            tracks.append(self._load_track(str(resolved)))

        self._track_cache[container.local_path] = tracks
        return list(tracks)

    def track(self, container: Container, index: int) -> Optional[Track]:
        """Fetch the Nth track of a container, or None past either end."""
        tracks = self.tracks(container)
        if 0 <= index < len(tracks):
            return tracks[index]
        return None

    def search(self, query: str) -> SearchResult:
        """Every unique track of every playlist; the list filter narrows it."""
        seen: set[str] = set()
        tracks = []
        for playlist in self._playlists:
            for track in self.tracks(playlist):
                if track.local_path not in seen:
                    seen.add(track.local_path)
                    tracks.append(track)
        logger.debug(f"Search {query!r} over {len(tracks)} tracks")
        return SearchResult(query=query, tracks=tuple(tracks))

    def _load_track(self, local_path: str) -> Track:
        track = self._metadata_cache.get(local_path)
        if track is None:
            track = extract_track_metadata(local_path)
            self._metadata_cache[local_path] = track
        return track

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def play_track(self, track: Track) -> bool:
        with self._lock:
            self._player, success = play_file(self._player, track.local_path)
            if success:
                self._end_reported = False
        if not success:
            logger.warning(f"Could not play {track.local_path}")
            self.events.put(
                SessionEvent(PLAYBACK_ERROR, {"local_path": track.local_path})
            )
        return success

    def pause(self) -> bool:
        with self._lock:
            self._player, success = pause_playback(self._player)
        return success

    def resume(self) -> bool:
        with self._lock:
            self._player, success = resume_playback(self._player)
        return success

    def is_playing(self) -> bool:
        with self._lock:
            return self._player.is_playing

    def _watch_playback(self) -> None:
        """Post one END_OF_TRACK event per started track."""
        interval = self.config.player.poll_interval
        while not self._stop.wait(interval):
            with self._lock:
                if self._end_reported:
                    continue
                snapshot = self._player

            # IPC round-trips happen outside the lock
            if not is_track_finished(snapshot):
                continue

            with self._lock:
                if self._end_reported or self._player is not snapshot:
                    continue
                self._end_reported = True
                self._player = self._player._replace(is_playing=False)

            logger.debug(f"Track finished: {snapshot.current_track}")
            self.events.put(
                SessionEvent(END_OF_TRACK, {"local_path": snapshot.current_track})
            )
