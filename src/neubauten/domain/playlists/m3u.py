"""
M3U/M3U8 playlist reading.
"""

import urllib.parse
from pathlib import Path
from typing import Optional

PLAYLIST_SUFFIXES = {".m3u", ".m3u8"}


def list_playlist_files(playlists_dir: Path) -> list[Path]:
    """Return playlist files in a directory, sorted by name (case-insensitive)."""
    if not playlists_dir.is_dir():
        return []
    return sorted(
        (
            path
            for path in playlists_dir.iterdir()
            if path.is_file() and path.suffix.lower() in PLAYLIST_SUFFIXES
        ),
        key=lambda path: path.name.lower(),
    )


def read_m3u(local_path: Path) -> list[str]:
    """
    Read the track entries of an M3U/M3U8 playlist file.

    Format can include:
    #EXTM3U - header (optional)
    #EXTINF:duration,artist - title - metadata line (optional)
    /path/to/track.mp3 - actual track path

    Args:
        local_path: Path to the M3U/M3U8 file

    Returns:
        Track entries in playlist order, exactly as written in the file

    Raises:
        FileNotFoundError: If the playlist file does not exist
    """
    if not local_path.exists():
        raise FileNotFoundError(f"Playlist file not found: {local_path}")

    try:
        # Try UTF-8 first (M3U8 standard)
        with open(local_path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except UnicodeDecodeError:
        # Fall back to latin-1 for older M3U files
        with open(local_path, "r", encoding="latin-1") as f:
            lines = f.readlines()

    entries = []
    for line in lines:
        line = line.strip().lstrip("\ufeff")
        if not line or line.startswith("#"):
            continue
        entries.append(line)

    return entries


def resolve_track_path(
    playlist_path: Path, track_path: str, library_root: Path
) -> Optional[Path]:
    """
    Resolve a track entry from a playlist to an existing absolute path.

    Tries, in order: the path as-is when absolute, relative to the playlist's
    directory, then relative to the library root. URL-encoded entries are
    decoded first.

    Returns:
        Resolved absolute Path or None if the track doesn't exist
    """
    if track_path.startswith("file://"):
        track_path = urllib.parse.urlparse(track_path).path
    if "%" in track_path:
        track_path = urllib.parse.unquote(track_path)

    track_path_obj = Path(track_path)

    if track_path_obj.is_absolute():
        return track_path_obj if track_path_obj.exists() else None

    candidate = (playlist_path.parent / track_path_obj).resolve()
    if candidate.exists():
        return candidate

    candidate = (library_root / track_path_obj).resolve()
    if candidate.exists():
        return candidate

    return None
