"""
Recombination of adjacent tokens into multi-token words.

Runs once over the best path, left to right. A text token whose tag has
recombination rules absorbs the next token if that one is also text and
carries one of the listed successor tags. Only one pair is merged per
anchor, so verb+suffix+suffix comes out as [verb+suffix], [suffix].
"""

from typing import List, Optional, Sequence

from wakachi.model import RecombinationModel
from wakachi.types import Token, Word


def recombine_tokens(tokens: Sequence[Token],
                     recombination: Optional[RecombinationModel] = None) -> List[Word]:
    """
    Fold a token sequence into words.

    Args:
        tokens: Tokens in text order.
        recombination: Merge rules. None or empty means every token is its
            own word.

    Returns:
        Words in text order, each holding one or two tokens.
    """
    words: List[Word] = []
    i = 0
    n = len(tokens)
    while i < n:
        cur = tokens[i]
        if recombination and i + 1 < n and _can_merge(cur, tokens[i + 1], recombination):
            words.append(Word((cur, tokens[i + 1])))
            i += 2
        else:
            words.append(Word((cur,)))
            i += 1
    return words


def _can_merge(left: Token, right: Token, recombination: RecombinationModel) -> bool:
    return left.is_text and right.is_text and recombination.can_merge(left.pos, right.pos)
