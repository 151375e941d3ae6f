"""
Pydantic models for wakachi results.

These give segmentation output a stable, serializable shape for the CLI's
JSON mode and for web APIs:

    from wakachi.models import SegmentationResult

    @app.get("/segment", response_model=SegmentationResult)
    def segment_endpoint(text: str):
        return SegmentationResult.from_words(text, wakachi.analyze(text))
"""

from typing import List, Sequence

from pydantic import BaseModel, Field

from wakachi.types import Token, Word


class TokenResult(BaseModel):
    """A single engine token."""
    text: str = Field(..., description="Surface text covered by the token")
    pos: str = Field("", description="PoS tag, empty for whitespace and skipped text")
    kind: str = Field("text", description="'text', 'whitespace' or 'skipped'")
    transition_probability: float = Field(
        1.0, description="Probability of this single step (not cumulative)"
    )

    @classmethod
    def from_token(cls, token: Token) -> "TokenResult":
        return cls(
            text=token.text,
            pos=token.pos,
            kind=token.kind.value,
            transition_probability=token.transition_probability,
        )


class WordResult(BaseModel):
    """
    One word: one token, or two when recombination merged them.
    """
    text: str = Field(..., description="Surface text as it appears in input")
    pos: str = Field("", description="PoS tag of the first token")
    start: int = Field(..., description="Start index in original text")
    end: int = Field(..., description="End index in original text")
    tokens: List[TokenResult] = Field(default_factory=list)

    @property
    def is_compound(self) -> bool:
        return len(self.tokens) > 1

    @property
    def is_whitespace(self) -> bool:
        return bool(self.tokens) and self.tokens[0].kind == "whitespace"


class SegmentationResult(BaseModel):
    """Segmentation of one input text."""
    text: str = Field(..., description="Input text")
    words: List[WordResult] = Field(default_factory=list)

    @classmethod
    def from_words(cls, text: str, words: Sequence[Word]) -> "SegmentationResult":
        """
        Create a SegmentationResult from wakachi.analyze() output.

        Word offsets are computed by walking the words in order, which is
        valid because the words always tile the input exactly.
        """
        results = []
        offset = 0
        for word in words:
            surface = word.text
            results.append(WordResult(
                text=surface,
                pos=word.pos,
                start=offset,
                end=offset + len(surface),
                tokens=[TokenResult.from_token(t) for t in word.tokens],
            ))
            offset += len(surface)
        return cls(text=text, words=results)

    def surfaces(self, include_whitespace: bool = False) -> List[str]:
        """Surface text of each word."""
        return [w.text for w in self.words if include_whitespace or not w.is_whitespace]
