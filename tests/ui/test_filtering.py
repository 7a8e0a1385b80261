"""Tests for the subsequence filter predicate."""

import itertools

from neubauten.ui.blessed.helpers.filtering import matches_filter, matching_indexes


class TestMatchesFilter:
    """Filter characters must appear in order, not necessarily adjacent."""

    def test_none_matches_everything(self):
        assert matches_filter("Tanz Debil", None)
        assert matches_filter("", None)

    def test_empty_string_matches_everything(self):
        """An empty filter is consumed immediately."""
        for text in ["", "a", "Steh Auf Berlin"]:
            assert matches_filter(text, "")

    def test_full_text_matches_itself(self):
        for text in ["Kollaps", "Z.N.S.", "Yü-Gung", "a b c"]:
            assert matches_filter(text, text)

    def test_non_contiguous_subsequence(self):
        assert matches_filter("Steh Auf Berlin", "SAB")
        assert matches_filter("bookshelf", "bkl")

    def test_order_breaking_permutations_fail(self):
        """Every permutation except the in-order one is rejected."""
        text = "abc"
        for perm in itertools.permutations(text):
            query = "".join(perm)
            assert matches_filter(text, query) == (query == text)

    def test_case_sensitive(self):
        assert not matches_filter("kollaps", "K")
        assert matches_filter("Kollaps", "K")

    def test_repeated_characters_need_distinct_positions(self):
        """Each query character consumes one position of the text."""
        assert matches_filter("aa", "aa")
        assert not matches_filter("a", "aa")
        assert not matches_filter("Blume", "BB")

    def test_query_longer_than_text(self):
        assert not matches_filter("ab", "abc")

    def test_long_inputs(self):
        """Large inputs are handled without recursion."""
        text = "x" * 50_000
        assert matches_filter(text, "x" * 50_000)
        assert not matches_filter(text, "x" * 50_001)


class TestMatchingIndexes:
    def test_keeps_item_order(self):
        texts = ["Tanz Debil", "Blume", "Headcleaner", "Z.N.S."]
        assert matching_indexes(texts, "e") == [0, 1, 2]

    def test_no_filter(self):
        assert matching_indexes(["a", "b"], None) == [0, 1]

    def test_no_matches(self):
        assert matching_indexes(["a", "b"], "z") == []
