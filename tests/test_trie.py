"""
Tests for trie.py - morph prefix trie.
"""

import pytest

from wakachi.trie import TrieIndex, TrieMatch, build_trie


class TestBuildTrie:
    """Tests for trie construction."""

    def test_shared_prefix_reuses_nodes(self):
        """Morphs sharing a prefix share its nodes."""
        trie = build_trie(["ab", "ac"])
        # root, a, b, c
        assert trie.node_count == 4
        assert len(trie) == 2

    def test_reinsert_is_noop(self):
        """Inserting the same morph twice changes nothing."""
        once = build_trie(["今日"])
        twice = build_trie(["今日", "今日"])
        assert len(twice) == 1
        assert twice.node_count == once.node_count

    def test_prefix_of_existing_morph(self):
        """A morph that is a prefix of another only marks a terminal."""
        trie = build_trie(["今日", "今"])
        assert trie.node_count == 3
        assert "今" in trie
        assert "今日" in trie

    def test_empty_morph_ignored(self):
        """Empty strings are skipped."""
        trie = build_trie(["", "a"])
        assert len(trie) == 1
        assert "" not in trie

    def test_empty_input(self):
        """An empty morph list yields a root-only trie."""
        trie = build_trie([])
        assert trie.node_count == 1
        assert len(trie) == 0
        assert trie.max_length == 0

    def test_max_length(self):
        trie = build_trie(["a", "っている", "ab"])
        assert trie.max_length == 4

    def test_accepts_generator(self):
        trie = build_trie(m for m in ["x", "y"])
        assert len(trie) == 2


class TestContains:
    """Tests for membership queries."""

    def test_inner_node_is_not_member(self):
        """A path that is only a prefix is not a morph."""
        trie = build_trie(["abc"])
        assert "ab" not in trie
        assert trie.has_prefix("ab")

    def test_unknown(self):
        trie = build_trie(["abc"])
        assert "x" not in trie
        assert not trie.has_prefix("abd")


class TestMatchesAt:
    """Tests for matches_at."""

    @pytest.fixture
    def trie(self) -> TrieIndex:
        return build_trie(["今", "今日", "今日は", "は", "日本"])

    def test_all_prefix_matches_shortest_first(self, trie):
        """Every terminal on the walk is reported, in order of depth."""
        matches = trie.matches_at("今日は晴れ", 0)
        assert matches == [
            TrieMatch("今", 1),
            TrieMatch("今日", 2),
            TrieMatch("今日は", 3),
        ]

    def test_match_from_middle(self, trie):
        """End offsets are absolute positions in the text."""
        matches = trie.matches_at("今日本", 1)
        assert matches == [TrieMatch("日本", 3)]

    def test_no_first_child(self, trie):
        """Text starting with an unknown character has no matches."""
        assert trie.matches_at("晴れ", 0) == []

    def test_stops_at_missing_child(self, trie):
        """Walking stops at the first character with no child."""
        assert trie.matches_at("今x日", 0) == [TrieMatch("今", 1)]

    def test_stops_at_end_of_text(self, trie):
        """A morph longer than the remaining text is not reported."""
        assert trie.matches_at("日", 0) == []

    def test_start_at_end(self, trie):
        assert trie.matches_at("今", 1) == []

    def test_match_fields(self, trie):
        match = trie.matches_at("は", 0)[0]
        assert match.text == "は"
        assert match.end == 1
