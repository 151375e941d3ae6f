"""
Segmentation context: the immutable bundle of dictionary and model data.

A SegmenterContext is never modified after it is built. Reloading a
dictionary builds a new context and swaps the module-level reference under
a lock; calls already holding the old context finish against it.
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from wakachi.model import (
    PosMap, RecombinationModel, TagIndex, TransitionModel, build_pos_map,
)
from wakachi.trie import TrieIndex, build_trie
from wakachi.types import Morph, Word
from wakachi.viterbi import ViterbiResult, segment, viterbi_decode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmenterContext:
    """Everything one segmentation call reads."""
    trie: TrieIndex
    pos_map: PosMap
    transitions: TransitionModel
    recombination: RecombinationModel = field(default_factory=RecombinationModel)
    tag_index: Optional[TagIndex] = None
    source: Optional[str] = None

    def __post_init__(self):
        if self.tag_index is None:
            object.__setattr__(self, "tag_index", TagIndex.from_pos_map(self.pos_map))

    @classmethod
    def build(
        cls,
        morphs: Iterable[Union[Morph, Tuple[str, str]]],
        transitions: Optional[Mapping[str, Mapping[str, float]]] = None,
        recombination: Optional[Mapping[str, Iterable[str]]] = None,
        source: Optional[str] = None,
    ) -> "SegmenterContext":
        """
        Build a context from plain in-memory structures.

        Args:
            morphs: Morph or (text, pos) pairs.
            transitions: {prev_pos: {next_pos: probability}}.
            recombination: {pos: [mergeable successor pos, ...]}.
            source: Where the data came from, for diagnostics.
        """
        morphs = list(morphs)
        return cls(
            trie=build_trie(text for text, _ in morphs),
            pos_map=build_pos_map(morphs),
            transitions=TransitionModel(transitions),
            recombination=RecombinationModel(recombination),
            source=source,
        )

    def segment(self, text: str) -> List[Word]:
        return segment(text, self.trie, self.pos_map, self.transitions,
                       self.recombination, self.tag_index)

    def decode(self, text: str) -> ViterbiResult:
        """Best token path and its score, before recombination."""
        return viterbi_decode(text, self.trie, self.pos_map, self.transitions,
                              self.tag_index)


# ============================================================================
# Active context
# ============================================================================

_context: Optional[SegmenterContext] = None
_context_lock = threading.Lock()


def get_context() -> SegmenterContext:
    """
    Get the active context, loading settings.DICT_PATH on first use.
    """
    ctx = _context
    if ctx is not None:
        return ctx

    with _context_lock:
        if _context is None:
            from wakachi.loading.dictionary import load_dictionary
            from wakachi.settings import DICT_PATH
            _swap(load_dictionary(DICT_PATH))
        return _context


def set_context(ctx: SegmenterContext) -> Optional[SegmenterContext]:
    """
    Make ctx the active context.

    Returns:
        The previously active context, if any.
    """
    with _context_lock:
        return _swap(ctx)


def reload_context(path: Optional[Union[str, Path]] = None) -> SegmenterContext:
    """
    Load a dictionary into a brand new context and make it active.

    The old context stays untouched and valid for calls still using it.
    If loading fails, the active context is left as it was.
    """
    from wakachi.loading.dictionary import load_dictionary
    from wakachi.settings import DICT_PATH

    ctx = load_dictionary(path if path is not None else DICT_PATH)
    set_context(ctx)
    return ctx


def clear_context() -> None:
    """Drop the active context."""
    global _context
    with _context_lock:
        _context = None


def _swap(ctx: SegmenterContext) -> Optional[SegmenterContext]:
    global _context
    previous = _context
    _context = ctx
    logger.info(
        "Active dictionary: %s (%d morphs, %d tags)",
        ctx.source or "<memory>", len(ctx.trie), len(ctx.tag_index) - 1,
    )
    return previous
