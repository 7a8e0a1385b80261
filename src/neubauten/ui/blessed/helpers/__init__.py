"""Blessed UI helper functions."""

from .filtering import matches_filter, matching_indexes
from .scrolling import calculate_scroll_offset, move_selection
from .terminal import BlessedSurface, KeySource, RenderSurface

__all__ = [
    "BlessedSurface",
    "KeySource",
    "RenderSurface",
    "calculate_scroll_offset",
    "matches_filter",
    "matching_indexes",
    "move_selection",
]
