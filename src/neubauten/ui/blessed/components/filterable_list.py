"""Scrollable, filterable list with a single selection."""

import copy
from typing import Generic, Iterable, Optional, TypeVar

from ..helpers.filtering import matching_indexes
from ..helpers.scrolling import calculate_scroll_offset, move_selection
from ..helpers.terminal import RenderSurface
from ..styles.formatting import pad_line
from ..styles.palette import STYLE_EMPHASIZED, STYLE_NORMAL

T = TypeVar("T")


class EmptySelectionError(LookupError):
    """Raised when the selection of a list with no matching items is requested."""


class FilterableList(Generic[T]):
    """
    Ordered items with a cursor, a scroll window and an optional filter.

    ``cursor_index`` and ``print_from_index`` index into ``matching_indexes``,
    not into ``items``. The items are fixed for the lifetime of the list;
    only the cursor, the scroll window and the filter change.
    """

    def __init__(self, items: Iterable[T], height: int, width: int) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._texts = [str(item) for item in self._items]
        self.height = max(1, height)
        self.width = width

        self.filter: Optional[str] = None
        self.cursor_index = 0
        self.print_from_index = 0
        self.matching_indexes: list[int] = matching_indexes(self._texts, None)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f"FilterableList(items={len(self._items)}, "
            f"matches={len(self.matching_indexes)}, cursor={self.cursor_index}, "
            f"filter={self.filter!r})"
        )

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def has_filter(self) -> bool:
        return self.filter is not None

    def is_empty(self) -> bool:
        """True when no item passes the current filter."""
        return not self.matching_indexes

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def set_filter(self, text: Optional[str]) -> None:
        """Apply a filter (None shows everything) and return to the top."""
        self.filter = text
        self.cursor_index = 0
        self.print_from_index = 0
        self.matching_indexes = matching_indexes(self._texts, text)

    def clear_filter(self) -> None:
        self.set_filter(None)

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def _step(self, delta: int) -> None:
        self.cursor_index = move_selection(
            self.cursor_index, delta, len(self.matching_indexes)
        )
        self.print_from_index = calculate_scroll_offset(
            self.cursor_index, self.print_from_index, self.height
        )

    def move_down(self) -> None:
        self._step(1)

    def move_up(self) -> None:
        self._step(-1)

    def move_top(self) -> None:
        # Step one row at a time so the scroll window follows
        while self.cursor_index > 0:
            self.move_up()

    def move_bottom(self) -> None:
        while self.cursor_index + 1 < len(self.matching_indexes):
            self.move_down()

    def move_to(self, item_index: int) -> None:
        """Step the cursor onto ``items[item_index]``; no-op if it is filtered out."""
        if item_index not in self.matching_indexes:
            return
        target = self.matching_indexes.index(item_index)
        while self.cursor_index < target:
            self.move_down()
        while self.cursor_index > target:
            self.move_up()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def selected_index(self) -> int:
        """
        Index into ``items`` of the selected row.

        Raises:
            EmptySelectionError: If no item matches the current filter
        """
        if not self.matching_indexes:
            raise EmptySelectionError(
                f"No item matches filter {self.filter!r}; nothing is selected"
            )
        return self.matching_indexes[self.cursor_index]

    def selected_item(self) -> T:
        """A copy of the selected item."""
        return copy.copy(self._items[self.selected_index()])

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def resize(self, height: int, width: int) -> None:
        """Adopt new viewport dimensions, keeping the cursor visible."""
        self.height = max(1, height)
        self.width = width
        self.print_from_index = calculate_scroll_offset(
            self.cursor_index, self.print_from_index, self.height
        )

    def visible_rows(self) -> list[tuple[str, bool]]:
        """(text, is_cursor) for each row inside the scroll window."""
        window = self.matching_indexes[
            self.print_from_index : self.print_from_index + self.height
        ]
        return [
            (self._texts[item_index], self.print_from_index + offset == self.cursor_index)
            for offset, item_index in enumerate(window)
        ]

    def render(
        self, surface: RenderSurface, x: int, y: int, reset_cursor: bool = False
    ) -> None:
        """Draw the visible rows starting at (x, y); the cursor row is emphasized."""
        if not self._items:
            return

        if reset_cursor:
            self.cursor_index = 0
            self.print_from_index = 0

        self.matching_indexes = matching_indexes(self._texts, self.filter)
        if self.cursor_index >= len(self.matching_indexes):
            self.cursor_index = max(0, len(self.matching_indexes) - 1)
            self.print_from_index = calculate_scroll_offset(
                self.cursor_index, min(self.print_from_index, self.cursor_index), self.height
            )

        for row, (text, is_cursor) in enumerate(self.visible_rows()):
            style = STYLE_EMPHASIZED if is_cursor else STYLE_NORMAL
            surface.draw_text(x, y + row, style, pad_line(f" {text}", self.width))
