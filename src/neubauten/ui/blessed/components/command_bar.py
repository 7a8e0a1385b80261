"""Command line echo: argument being typed, active filter or pending keys."""

from typing import Optional

from ..events.command_parser import ArgumentMode, CommandParser
from ..helpers.terminal import RenderSurface
from ..styles.formatting import pad_line
from ..styles.palette import STYLE_MUTED


def format_command_line(parser: CommandParser, active_filter: Optional[str]) -> str:
    """Text for the bottom row; argument entry takes precedence over the filter."""
    if parser.argument_mode is ArgumentMode.FILTER:
        return f"/{parser.argument}"
    if parser.argument_mode is ArgumentMode.SEARCH:
        return f"Search: {parser.argument}"
    if active_filter is not None:
        return f"Filter: {active_filter}"
    return parser.input_sequence


def render_command_bar(surface: RenderSurface, y: int, width: int, text: str) -> None:
    surface.draw_text(0, y, STYLE_MUTED, pad_line(text, width))
