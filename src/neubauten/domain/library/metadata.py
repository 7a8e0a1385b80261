"""
Track metadata extraction using Mutagen.
"""

from pathlib import Path
from typing import Any, Optional

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from .models import Track


def get_tag_value(audio_file: Any, tag_names: list[str]) -> Optional[str]:
    """Get tag value, trying multiple possible tag names."""
    for tag_name in tag_names:
        try:
            value = audio_file.get(tag_name)
        except (KeyError, ValueError):
            # Some formats (like Vorbis) raise ValueError for non-existent keys
            continue
        if value:
            if isinstance(value, list):
                return str(value[0])
            return str(value)
    return None


def extract_metadata_from_filename(local_path: str) -> dict[str, Optional[str]]:
    """Parse "Artist - Title" from the file name as a fallback."""
    title = Path(local_path).stem
    artist = None

    if " - " in title:
        artist, title = (part.strip() for part in title.split(" - ", 1))

    return {"title": title, "artist": artist}


def extract_track_metadata(local_path: str) -> Track:
    """Build a Track from the file's tags, falling back to its name."""
    fallback = extract_metadata_from_filename(local_path)

    try:
        audio_file = MutagenFile(local_path)
    except (MutagenError, OSError) as e:
        logger.warning(f"Could not read metadata from {local_path}: {e}")
        audio_file = None

    if audio_file is None:
        return Track(
            local_path=local_path,
            title=fallback["title"],
            artist=fallback["artist"],
        )

    # ID3 (MP3), MP4, and Vorbis/Opus tags
    title = get_tag_value(audio_file, ["TIT2", "\xa9nam", "TITLE", "title"])
    artist = get_tag_value(audio_file, ["TPE1", "\xa9ART", "ARTIST", "artist"])

    duration = None
    if getattr(audio_file, "info", None) is not None:
        duration = getattr(audio_file.info, "length", None)

    return Track(
        local_path=local_path,
        title=title or fallback["title"],
        artist=artist or fallback["artist"],
        duration=duration,
    )
