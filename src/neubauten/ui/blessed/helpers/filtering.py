"""Subsequence filter predicate for list views."""

from typing import Optional


def matches_filter(text: str, query: Optional[str]) -> bool:
    """
    Check whether query's characters appear in text, in order.

    The characters need not be contiguous: "bkl" matches "bookshelf". Each
    query character must be found strictly after the previous match, and the
    comparison is case-sensitive. This is a boolean test, not a ranking.

    Args:
        text: Rendered item text
        query: Filter string, or None for no filter

    Returns:
        True if every query character was consumed (always True for None or "")

    Examples:
        >>> matches_filter("Bauten", "Btn")
        True
        >>> matches_filter("Bauten", "ntB")
        False
    """
    if query is None:
        return True

    position = 0
    for char in query:
        position = text.find(char, position)
        if position == -1:
            return False
        position += 1

    return True


def matching_indexes(items: list[str], query: Optional[str]) -> list[int]:
    """Indexes of the rendered items that pass the filter, in order."""
    return [index for index, text in enumerate(items) if matches_filter(text, query)]
