"""
Prefix trie over dictionary morphs.

Nodes live in a flat arena and refer to their children by integer index,
so the whole structure is a handful of lists with no object per node.
Node 0 is the root.

A TrieIndex is immutable once built: it is safe to share between any
number of concurrent segmentation calls.
"""

from typing import Dict, Iterable, List, NamedTuple, Tuple

ROOT = 0


class TrieMatch(NamedTuple):
    """A dictionary morph found in the text."""
    text: str
    end: int


class TrieIndex:
    """
    Read-only prefix tree answering "which morphs start at position p".

    Use build_trie() to construct one.
    """

    __slots__ = ("_children", "_terminal", "_size", "_max_length")

    def __init__(self, children: List[Dict[str, int]], terminal: List[bool],
                 size: int, max_length: int):
        self._children: Tuple[Dict[str, int], ...] = tuple(children)
        self._terminal: Tuple[bool, ...] = tuple(terminal)
        self._size = size
        self._max_length = max_length

    @property
    def node_count(self) -> int:
        return len(self._children)

    @property
    def max_length(self) -> int:
        """Length of the longest morph in the trie."""
        return self._max_length

    def __len__(self) -> int:
        """Number of distinct morphs stored."""
        return self._size

    def __contains__(self, morph: str) -> bool:
        node = self._walk(morph)
        return node is not None and self._terminal[node]

    def has_prefix(self, prefix: str) -> bool:
        """Check if any stored morph starts with prefix."""
        return self._walk(prefix) is not None

    def _walk(self, text: str):
        node = ROOT
        for ch in text:
            node = self._children[node].get(ch)
            if node is None:
                return None
        return node

    def matches_at(self, text: str, start: int) -> List[TrieMatch]:
        """
        Find every morph that begins at ``start`` in ``text``.

        Matches are returned shortest first. Scanning stops at the first
        character with no child, so the cost is bounded by the longest
        morph rather than the text length.

        Args:
            text: Text being segmented.
            start: Index to match from.

        Returns:
            List of TrieMatch(text, end), empty if text[start] begins no morph.
        """
        found: List[TrieMatch] = []
        children = self._children
        terminal = self._terminal
        node = ROOT
        idx = start
        n = len(text)
        while idx < n:
            node = children[node].get(text[idx])
            if node is None:
                break
            idx += 1
            if terminal[node]:
                found.append(TrieMatch(text[start:idx], idx))
        return found


def build_trie(morphs: Iterable[str]) -> TrieIndex:
    """
    Build a TrieIndex from morph surface strings.

    Shared prefixes reuse existing nodes and inserting the same morph twice
    is a no-op. Empty strings are ignored.

    Args:
        morphs: Morph surface texts.

    Returns:
        A new immutable TrieIndex.
    """
    children: List[Dict[str, int]] = [{}]
    terminal: List[bool] = [False]
    size = 0
    max_length = 0

    for morph in morphs:
        if not morph:
            continue
        node = ROOT
        for ch in morph:
            child = children[node].get(ch)
            if child is None:
                child = len(children)
                children.append({})
                terminal.append(False)
                children[node][ch] = child
            node = child
        if not terminal[node]:
            terminal[node] = True
            size += 1
            max_length = max(max_length, len(morph))

    return TrieIndex(children, terminal, size, max_length)
