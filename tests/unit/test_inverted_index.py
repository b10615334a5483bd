"""Unit tests for the token -> position postings."""

import pytest

from jaccard_suggest.search.inverted_index import InvertedIndex


@pytest.mark.unit
class TestInvertedIndex:
    def test_add_and_lookup(self):
        index = InvertedIndex()
        index.add(0, {"apple", "pie"})
        index.add(1, {"apple", "juice"})

        assert index.postings("apple") == frozenset({0, 1})
        assert index.postings("pie") == frozenset({0})
        assert index.postings("missing") == frozenset()
        assert "juice" in index
        assert len(index) == 3

    def test_candidates_is_union_of_postings(self):
        index = InvertedIndex()
        index.add(0, {"apple", "pie"})
        index.add(1, {"banana"})
        index.add(2, {"apple", "juice"})

        assert index.candidates({"pie", "juice"}) == {0, 2}
        assert index.candidates({"banana", "unknown"}) == {1}
        assert index.candidates({"unknown"}) == set()
        assert index.candidates(set()) == set()

    def test_discard_drops_empty_postings(self):
        index = InvertedIndex()
        index.add(0, {"apple", "pie"})
        index.add(1, {"apple"})

        index.discard(0, {"apple", "pie"})

        assert index.postings("apple") == frozenset({1})
        assert "pie" not in index
        assert index.vocabulary() == ["apple"]

    def test_discard_unknown_token_is_noop(self):
        index = InvertedIndex()
        index.add(0, {"apple"})
        index.discard(0, {"pear"})
        assert index.postings("apple") == frozenset({0})

    def test_check_accepts_consistent_state(self):
        index = InvertedIndex()
        token_sets = [frozenset({"apple", "pie"}), frozenset(), frozenset({"apple"})]
        for position, tokens in enumerate(token_sets):
            index.add(position, tokens)
        assert index.check(token_sets) == []

    def test_check_reports_missing_and_stale_postings(self):
        index = InvertedIndex()
        index.add(0, {"apple"})
        index.add(1, {"stale"})
        token_sets = [frozenset({"apple", "pie"}), frozenset()]

        problems = index.check(token_sets)

        assert any("'pie'" in problem and "missing" in problem for problem in problems)
        assert any("'stale'" in problem and "position 1" in problem for problem in problems)
