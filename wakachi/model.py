"""
Lookup tables consumed by the segmentation engine.

- PosMap: morph text -> possible PoS tags
- TransitionModel: (previous PoS, next PoS) -> probability
- RecombinationModel: PoS -> PoS tags it merges with when followed
- TagIndex: PoS tag <-> dense integer, used to address DP table rows

All of them are immutable after construction.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from wakachi.constants import (
    BOUNDARY_TRANSITION_PROB,
    EMPTY_POS,
    UNKNOWN_TRANSITION_PROB,
)


# ============================================================================
# PosMap
# ============================================================================

class PosMap:
    """Multi-valued mapping from morph text to PoS tags."""

    __slots__ = ("_tags",)

    def __init__(self, tags: Mapping[str, Tuple[str, ...]]):
        self._tags = MappingProxyType(dict(tags))

    def tags_for(self, morph: str) -> Tuple[str, ...]:
        """PoS tags for a morph, empty if the morph is unknown."""
        return self._tags.get(morph, ())

    @property
    def all_tags(self) -> FrozenSet[str]:
        """Every distinct tag used by any morph."""
        return frozenset(tag for tags in self._tags.values() for tag in tags)

    def __contains__(self, morph: str) -> bool:
        return morph in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)


def build_pos_map(morphs: Iterable[Tuple[str, str]]) -> PosMap:
    """
    Build a PosMap from (text, pos) pairs.

    Duplicate pairs collapse; tags keep first-seen order per morph.
    """
    tags: Dict[str, List[str]] = {}
    for text, pos in morphs:
        bucket = tags.setdefault(text, [])
        if pos not in bucket:
            bucket.append(pos)
    return PosMap({text: tuple(pos_list) for text, pos_list in tags.items()})


# ============================================================================
# TransitionModel
# ============================================================================

class TransitionModel:
    """
    PoS bigram transition probabilities.

    An absent pair is not a zero: it falls back to UNKNOWN_TRANSITION_PROB,
    which keeps incomplete models usable. Transitions out of the empty
    (unconstrained) tag always have probability 1.0.
    """

    __slots__ = ("_table",)

    def __init__(self, table: Optional[Mapping[str, Mapping[str, float]]] = None):
        frozen = {}
        for prev_pos, row in (table or {}).items():
            for next_pos, prob in row.items():
                if not 0.0 < prob <= 1.0:
                    raise ValueError(
                        f"Transition probability {prev_pos}->{next_pos} must be "
                        f"in (0, 1], got {prob!r}"
                    )
            frozen[prev_pos] = MappingProxyType(dict(row))
        self._table = MappingProxyType(frozen)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str, float]]) -> "TransitionModel":
        """Build from (prev, next, probability) triples."""
        table: Dict[str, Dict[str, float]] = {}
        for prev_pos, next_pos, prob in pairs:
            table.setdefault(prev_pos, {})[next_pos] = prob
        return cls(table)

    def probability(self, prev_pos: str, next_pos: str) -> float:
        """Probability of moving from prev_pos to next_pos."""
        if prev_pos == EMPTY_POS:
            return BOUNDARY_TRANSITION_PROB
        row = self._table.get(prev_pos)
        if row is not None:
            prob = row.get(next_pos)
            if prob is not None:
                return prob
        return UNKNOWN_TRANSITION_PROB

    def has_pair(self, prev_pos: str, next_pos: str) -> bool:
        row = self._table.get(prev_pos)
        return row is not None and next_pos in row

    @property
    def tags(self) -> FrozenSet[str]:
        """Every tag mentioned on either side of a transition."""
        result = set(self._table)
        for row in self._table.values():
            result.update(row)
        return frozenset(result)

    def __len__(self) -> int:
        return sum(len(row) for row in self._table.values())


# ============================================================================
# RecombinationModel
# ============================================================================

class RecombinationModel:
    """Which PoS tag may absorb an immediately following PoS tag."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Optional[Mapping[str, Iterable[str]]] = None):
        frozen = {}
        for pos, successors in (rules or {}).items():
            # A bare string would otherwise become a set of its letters
            if isinstance(successors, str):
                raise TypeError(
                    f"Recombination successors for {pos!r} must be a collection "
                    f"of tags, got the string {successors!r}"
                )
            frozen[pos] = frozenset(successors)
        self._rules = MappingProxyType(frozen)

    def successors(self, pos: str) -> FrozenSet[str]:
        return self._rules.get(pos, frozenset())

    def can_merge(self, left_pos: str, right_pos: str) -> bool:
        return right_pos in self._rules.get(left_pos, ())

    def __contains__(self, pos: str) -> bool:
        return pos in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)


# ============================================================================
# TagIndex
# ============================================================================

class TagIndex:
    """
    Dense integer ids for PoS tags.

    The empty tag is always id 0; the rest follow in sorted order, so a
    lower id also means a lower-sorting tag.
    """

    __slots__ = ("_tags", "_ids")

    def __init__(self, tags: Iterable[str]):
        ordered = [EMPTY_POS] + sorted(set(tags) - {EMPTY_POS})
        self._tags: Tuple[str, ...] = tuple(ordered)
        self._ids = MappingProxyType({tag: i for i, tag in enumerate(ordered)})

    @classmethod
    def from_pos_map(cls, pos_map: PosMap) -> "TagIndex":
        return cls(pos_map.all_tags)

    def id_of(self, tag: str) -> int:
        return self._ids[tag]

    def tag_of(self, tag_id: int) -> str:
        return self._tags[tag_id]

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._tags

    def __contains__(self, tag: str) -> bool:
        return tag in self._ids

    def __len__(self) -> int:
        return len(self._tags)

