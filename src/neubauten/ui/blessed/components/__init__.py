"""Blessed UI rendering components."""

from .command_bar import format_command_line, render_command_bar
from .filterable_list import EmptySelectionError, FilterableList
from .layout import calculate_layout
from .status_bar import format_status_line, render_status_bar

__all__ = [
    "EmptySelectionError",
    "FilterableList",
    "calculate_layout",
    "format_command_line",
    "format_status_line",
    "render_command_bar",
    "render_status_bar",
]
