"""Library domain - track and playlist models, metadata extraction."""

from .metadata import extract_metadata_from_filename, extract_track_metadata
from .models import Playlist, SearchResult, Track

__all__ = [
    "Playlist",
    "SearchResult",
    "Track",
    "extract_metadata_from_filename",
    "extract_track_metadata",
]
