"""Style names understood by the render surface.

Each value is a blessed formatting attribute name; the empty string draws
with the terminal's default colors.
"""

STYLE_NORMAL = ""
STYLE_EMPHASIZED = "bold_white_on_black"
STYLE_STATUS = "bold_white_on_cyan"  # inverted bar
STYLE_MUTED = "bright_black"
