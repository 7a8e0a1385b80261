"""Pure helper functions for scrolling and selection in list-based UI components."""


def calculate_scroll_offset(
    selected: int,
    current_scroll: int,
    visible_items: int,
) -> int:
    """Calculate scroll offset to keep selected item visible in viewport.

    When the selection moves by a single row past either edge of the viewport
    the offset moves by exactly one row; there is no re-centering.

    Args:
        selected: Index of the currently selected item (0-based)
        current_scroll: Current scroll offset (0-based)
        visible_items: Number of items visible in the viewport

    Returns:
        New scroll offset to keep selected item visible

    Examples:
        >>> # Selection one row below viewport - scroll down one row
        >>> calculate_scroll_offset(selected=10, current_scroll=0, visible_items=10)
        1

        >>> # Selection one row above viewport - scroll up one row
        >>> calculate_scroll_offset(selected=4, current_scroll=5, visible_items=10)
        4

        >>> # Selection within viewport - no change
        >>> calculate_scroll_offset(selected=5, current_scroll=0, visible_items=10)
        0
    """
    if selected >= current_scroll + visible_items:
        return selected - visible_items + 1

    if selected < current_scroll:
        return selected

    return current_scroll


def move_selection(current: int, delta: int, total_items: int) -> int:
    """Move selection by delta, clamped to [0, total_items - 1].

    Examples:
        >>> move_selection(current=9, delta=1, total_items=10)
        9
        >>> move_selection(current=0, delta=-1, total_items=10)
        0
        >>> move_selection(current=5, delta=1, total_items=10)
        6
    """
    if total_items == 0:
        return 0
    return max(0, min(current + delta, total_items - 1))
