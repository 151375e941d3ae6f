"""
Core value types for Wakachi segmentation output.

Token and Word are frozen so a finished segmentation can be shared and
cached freely.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple

from wakachi.constants import EMPTY_POS


class TokenKind(str, Enum):
    """How a token was produced by the engine."""
    TEXT = "text"
    WHITESPACE = "whitespace"
    SKIPPED = "skipped"


class Morph(NamedTuple):
    """A (surface text, PoS tag) fact from the dictionary."""
    text: str
    pos: str


@dataclass(frozen=True)
class Token:
    """
    One step of the winning path.

    Attributes:
        text: Surface span covered by this step.
        pos: PoS tag, or the empty tag for whitespace and skipped characters.
        kind: Which engine rule produced the token.
        transition_probability: Probability of this single step. The
            cumulative score is only tracked on the DP state.
    """
    text: str
    pos: str = EMPTY_POS
    kind: TokenKind = TokenKind.TEXT
    transition_probability: float = 1.0

    @property
    def is_text(self) -> bool:
        return self.kind == TokenKind.TEXT


@dataclass(frozen=True)
class Word:
    """An ordered, non-empty run of tokens produced by recombination."""
    tokens: Tuple[Token, ...]

    def __post_init__(self):
        if not self.tokens:
            raise ValueError("Word must contain at least one token")

    @property
    def text(self) -> str:
        """Concatenated surface text of all tokens."""
        return "".join(t.text for t in self.tokens)

    @property
    def pos(self) -> str:
        """PoS tag of the anchor (first) token."""
        return self.tokens[0].pos

    @property
    def kind(self) -> TokenKind:
        return self.tokens[0].kind

    def __len__(self) -> int:
        return len(self.tokens)
