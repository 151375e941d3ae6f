"""
Viterbi segmentation with PoS transitions and whitespace/skip handling.

The DP table has one row per text position (0..N) and one column per PoS
tag (the empty tag included). A cell holds the best-scoring path that
reaches that position with that last tag; a worse path to the same cell is
dropped on arrival, which is what keeps the search linear in the text
length instead of exponential.

From every live state exactly one rule fires, in this order:

1. Whitespace: the whole whitespace run is consumed as one token and the
   PoS tag passes through unchanged (log-prob 0).
2. Dictionary: every trie match starting here, under every PoS tag the
   morph has, moves to (match end, tag) scored by the transition model.
3. Skip: if nothing matched, one character is consumed with a heavy
   penalty and the PoS tag passes through, so no position is a dead end.

Scores are natural-log probabilities and are only ever added.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional

from wakachi.characters import whitespace_run_end
from wakachi.constants import EMPTY_POS, SKIP_PROB, SKIP_SCORE, WHITESPACE_PROB
from wakachi.errors import SegmentationInvariantError
from wakachi.model import PosMap, RecombinationModel, TagIndex, TransitionModel
from wakachi.recombine import recombine_tokens
from wakachi.trie import TrieIndex
from wakachi.types import Token, TokenKind, Word

logger = logging.getLogger(__name__)


# ============================================================================
# DP State
# ============================================================================

class DPState:
    """
    Best known path to (position, PoS).

    ``prev`` is a plain reference, so one ancestor may be shared by several
    live states until the winner is picked.
    """

    __slots__ = ("position", "pos_id", "score", "prev", "token")

    def __init__(self, position: int, pos_id: int, score: float,
                 prev: Optional["DPState"] = None, token: Optional[Token] = None):
        self.position = position
        self.pos_id = pos_id
        self.score = score
        self.prev = prev
        self.token = token

    @property
    def is_initial(self) -> bool:
        return self.prev is None

    def __repr__(self) -> str:
        text = self.token.text if self.token else None
        return (f"DPState(position={self.position}, pos_id={self.pos_id}, "
                f"score={self.score:.4f}, token={text!r})")


@dataclass
class ViterbiResult:
    tokens: List[Token]
    score: float


# ============================================================================
# DP Table
# ============================================================================

class ViterbiTable:
    """
    Fixed-width DP table: rows[position][pos_id] -> DPState or None.

    Allocated fresh for every call and never shared.
    """

    def __init__(self, length: int, tag_index: TagIndex):
        self.length = length
        self.tag_index = tag_index
        width = len(tag_index)
        self.rows: List[List[Optional[DPState]]] = [
            [None] * width for _ in range(length + 1)
        ]
        self.rows[0][0] = DPState(0, 0, 0.0)

    @property
    def width(self) -> int:
        return len(self.tag_index)

    def get(self, position: int, pos: str) -> Optional[DPState]:
        return self.rows[position][self.tag_index.id_of(pos)]

    def states_at(self, position: int) -> Iterator[DPState]:
        """Populated states at a position, in tag-id order."""
        for state in self.rows[position]:
            if state is not None:
                yield state

    def state_count(self, position: int) -> int:
        return sum(1 for state in self.rows[position] if state is not None)

    def propose(self, position: int, pos_id: int, prev: DPState,
                token: Token, addend: float) -> bool:
        """
        Offer a path into (position, pos_id).

        The proposal replaces the stored state only if it scores strictly
        higher, or scores equally and wins the tie-break: the longer token
        first, then the lower-sorting predecessor tag.

        Returns:
            True if the table was updated.
        """
        row = self.rows[position]
        score = prev.score + addend
        current = row[pos_id]
        if current is not None:
            if score < current.score:
                return False
            if score == current.score and not _wins_tie(prev, token, current):
                return False
        row[pos_id] = DPState(position, pos_id, score, prev, token)
        return True

    def best_terminal(self) -> DPState:
        """
        Highest-scoring state at the end of the text.

        Raises:
            SegmentationInvariantError: If the last row is empty.
        """
        best: Optional[DPState] = None
        for state in self.states_at(self.length):
            # Tag-id order, so strict > keeps the lowest tag on ties
            if best is None or state.score > best.score:
                best = state
        if best is None:
            raise SegmentationInvariantError(
                f"No path reaches position {self.length}"
            )
        return best


def _wins_tie(prev: DPState, token: Token, current: DPState) -> bool:
    current_len = len(current.token.text)
    if len(token.text) != current_len:
        return len(token.text) > current_len
    return prev.pos_id < current.prev.pos_id


# ============================================================================
# Forward pass
# ============================================================================

def build_table(text: str, trie: TrieIndex, pos_map: PosMap,
                transitions: TransitionModel,
                tag_index: Optional[TagIndex] = None) -> ViterbiTable:
    """
    Fill the DP table for text.

    Args:
        text: Input text.
        trie: Dictionary trie.
        pos_map: Morph -> PoS tags.
        transitions: PoS transition model.
        tag_index: Column layout. Built from pos_map if omitted.

    Returns:
        The filled ViterbiTable.
    """
    if tag_index is None:
        tag_index = TagIndex.from_pos_map(pos_map)

    n = len(text)
    table = ViterbiTable(n, tag_index)

    for idx in range(n):
        states = list(table.states_at(idx))
        if not states:
            continue

        # 1. Whitespace run, tag passes through
        ws_end = whitespace_run_end(text, idx)
        if ws_end > idx:
            ws_token = Token(text[idx:ws_end], EMPTY_POS, TokenKind.WHITESPACE,
                             WHITESPACE_PROB)
            for state in states:
                table.propose(ws_end, state.pos_id, state, ws_token, 0.0)
            continue

        # 2. Dictionary matches; a morph without tags cannot move the path
        candidates = [
            (match, pos_map.tags_for(match.text))
            for match in trie.matches_at(text, idx)
        ]
        candidates = [(match, tags) for match, tags in candidates if tags]

        if candidates:
            for state in states:
                prev_pos = tag_index.tag_of(state.pos_id)
                for match, tags in candidates:
                    for tag in tags:
                        prob = transitions.probability(prev_pos, tag)
                        token = Token(match.text, tag, TokenKind.TEXT, prob)
                        table.propose(match.end, tag_index.id_of(tag), state,
                                      token, math.log(prob))
            continue

        # 3. Skip one character, tag passes through
        skip_token = Token(text[idx], EMPTY_POS, TokenKind.SKIPPED, SKIP_PROB)
        for state in states:
            table.propose(idx + 1, state.pos_id, state, skip_token, SKIP_SCORE)

    return table


# ============================================================================
# Backtrace
# ============================================================================

def backtrace(state: DPState) -> List[Token]:
    """Tokens on the path ending at state, left to right."""
    tokens: List[Token] = []
    while state.prev is not None:
        tokens.append(state.token)
        state = state.prev
    tokens.reverse()
    return tokens


def viterbi_decode(text: str, trie: TrieIndex, pos_map: PosMap,
                   transitions: TransitionModel,
                   tag_index: Optional[TagIndex] = None) -> ViterbiResult:
    """
    Best token sequence for text and its cumulative log-probability.

    Empty text yields no tokens and a score of 0.
    """
    if not text:
        return ViterbiResult([], 0.0)

    table = build_table(text, trie, pos_map, transitions, tag_index)
    best = table.best_terminal()
    tokens = backtrace(best)

    logger.debug(
        "Segmented %d chars: %d tags, %d tokens, score %.4f",
        len(text), table.width, len(tokens), best.score,
    )
    return ViterbiResult(tokens, best.score)


def segment(text: str, trie: TrieIndex, pos_map: PosMap,
            transitions: TransitionModel,
            recombination: Optional[RecombinationModel] = None,
            tag_index: Optional[TagIndex] = None) -> List[Word]:
    """
    Segment text into PoS-tagged words.

    Args:
        text: Input text.
        trie: Dictionary trie.
        pos_map: Morph -> PoS tags.
        transitions: PoS transition model.
        recombination: Merge rules applied after the best path is found.
        tag_index: Column layout. Built from pos_map if omitted.

    Returns:
        Ordered list of Words whose surface texts concatenate to text.

    Example:
        >>> words = segment("今日は", trie, pos_map, transitions)
        >>> [w.text for w in words]
        ['今日', 'は']
    """
    result = viterbi_decode(text, trie, pos_map, transitions, tag_index)
    return recombine_tokens(result.tokens, recombination)
