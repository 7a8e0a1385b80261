"""Playlists domain - reading playlist files from disk."""

from .m3u import PLAYLIST_SUFFIXES, list_playlist_files, read_m3u, resolve_track_path

__all__ = [
    "PLAYLIST_SUFFIXES",
    "list_playlist_files",
    "read_m3u",
    "resolve_track_path",
]
