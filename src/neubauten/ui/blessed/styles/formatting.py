"""Formatting helper functions."""


def format_time(seconds: float) -> str:
    """
    Format seconds as M:SS.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted time string
    """
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def pad_line(text: str, width: int) -> str:
    """Truncate or right-pad text with spaces to exactly width cells."""
    if width <= 0:
        return ""
    return text[:width].ljust(width)
