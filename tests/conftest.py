"""Shared fixtures: a recording render surface, scripted keys and a fake session."""

import queue
from typing import Optional

import pytest
from blessed.keyboard import Keystroke

from neubauten.core.config import Config
from neubauten.domain.library.models import Playlist, SearchResult, Track

NAMED_KEYS = {
    "<enter>": Keystroke("\n", name="KEY_ENTER"),
    "<esc>": Keystroke("\x1b", name="KEY_ESCAPE"),
    "<bs>": Keystroke("\x7f", name="KEY_BACKSPACE"),
    "<up>": Keystroke("\x1b[A", name="KEY_UP"),
    "<down>": Keystroke("\x1b[B", name="KEY_DOWN"),
}


def make_keystroke(key_name: str) -> Keystroke:
    """Keystroke for a single character or a <named> key."""
    if key_name in NAMED_KEYS:
        return NAMED_KEYS[key_name]
    return Keystroke(key_name)


class FakeSurface:
    """RenderSurface that records draw calls."""

    def __init__(self, width: int = 40, height: int = 10) -> None:
        self.width = width
        self.height = height
        self.draws: list[tuple[int, int, str, str]] = []
        self.clears = 0
        self.presents = 0

    def clear(self) -> None:
        self.clears += 1
        self.draws.clear()

    def draw_text(self, x: int, y: int, style: str, text: str) -> None:
        self.draws.append((x, y, style, text))

    def present(self) -> None:
        self.presents += 1

    def row(self, y: int) -> Optional[tuple[str, str]]:
        """(style, text) last drawn on row y since the last clear."""
        for _, draw_y, style, text in reversed(self.draws):
            if draw_y == y:
                return style, text
        return None


class ScriptedKeys:
    """KeySource replaying a fixed list of keys; None entries simulate timeouts."""

    def __init__(self, keys: list[Optional[str]]) -> None:
        self._keys = list(keys)
        self.polls = 0

    def inkey(self, timeout: Optional[float] = None) -> Keystroke:
        self.polls += 1
        if not self._keys:
            raise RuntimeError("key script exhausted")
        key_name = self._keys.pop(0)
        if key_name is None:
            return Keystroke()
        return make_keystroke(key_name)


class FakeSession:
    """In-memory session: playlists map names to track lists."""

    def __init__(self, playlists: dict[str, list[Track]]) -> None:
        self.events: "queue.Queue" = queue.Queue()
        self._playlists = [Playlist(name=name) for name in playlists]
        self._tracks = {name: list(tracks) for name, tracks in playlists.items()}
        self.played: list[Track] = []
        self.playing = False
        self.play_succeeds = True
        self.closed = False

    def playlists(self) -> list[Playlist]:
        return list(self._playlists)

    def playlist(self, index: int) -> Optional[Playlist]:
        if 0 <= index < len(self._playlists):
            return self._playlists[index]
        return None

    def tracks(self, container) -> list[Track]:
        if isinstance(container, SearchResult):
            return list(container.tracks)
        return list(self._tracks.get(container.name, []))

    def track(self, container, index: int) -> Optional[Track]:
        tracks = self.tracks(container)
        if 0 <= index < len(tracks):
            return tracks[index]
        return None

    def search(self, query: str) -> SearchResult:
        seen = []
        for tracks in self._tracks.values():
            for track in tracks:
                if track not in seen:
                    seen.append(track)
        return SearchResult(query=query, tracks=tuple(seen))

    def play_track(self, track: Track) -> bool:
        self.played.append(track)
        self.playing = self.play_succeeds
        return self.play_succeeds

    def pause(self) -> bool:
        self.playing = False
        return True

    def resume(self) -> bool:
        self.playing = True
        return True

    def is_playing(self) -> bool:
        return self.playing

    def close(self) -> None:
        self.closed = True


def _track(artist: str, title: str, duration: float = 240.0) -> Track:
    return Track(
        local_path=f"/music/{artist} - {title}.flac",
        title=title,
        artist=artist,
        duration=duration,
    )


@pytest.fixture
def keystroke():
    """Factory turning "j" or "<enter>" into a blessed Keystroke."""
    return make_keystroke


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def library() -> dict[str, list[Track]]:
    return {
        "Kollaps": [
            _track("Einstürzende Neubauten", "Tanz Debil", 183.0),
            _track("Einstürzende Neubauten", "Steh Auf Berlin", 196.0),
        ],
        "Halber Mensch": [
            _track("Einstürzende Neubauten", "Yü-Gung", 326.0),
            _track("Einstürzende Neubauten", "Z.N.S.", 201.0),
        ],
        "Tabula Rasa": [
            _track("Einstürzende Neubauten", "Die Interimsliebenden", 396.0),
            _track("Einstürzende Neubauten", "Blume", 289.0),
            _track("Einstürzende Neubauten", "Headcleaner", 659.0),
        ],
    }


@pytest.fixture
def session(library) -> FakeSession:
    return FakeSession(library)


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def scripted_keys():
    """Factory for a ScriptedKeys source."""
    return ScriptedKeys
