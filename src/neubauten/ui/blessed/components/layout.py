"""Layout calculation functions."""

from ..helpers.terminal import RenderSurface

# Status line and command line sit below the list
FOOTER_HEIGHT = 2


def calculate_layout(surface: RenderSurface) -> dict[str, int]:
    """
    Pure function: calculate y-positions for all regions.

    Args:
        surface: Render surface to lay out

    Returns:
        Dictionary with region positions and heights
    """
    try:
        term_height = surface.height
        term_width = surface.width
    except Exception:
        term_height, term_width = 24, 80  # Safe fallback

    term_height = max(term_height, FOOTER_HEIGHT + 1)

    return {
        "list_y": 0,
        "list_height": term_height - FOOTER_HEIGHT,
        "status_y": term_height - 2,
        "command_y": term_height - 1,
        "width": max(term_width, 1),
    }
