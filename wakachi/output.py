"""
Rendering of segmentation results for the CLI.
"""

import json
from typing import Optional, Sequence

from wakachi.models import SegmentationResult
from wakachi.types import TokenKind, Word


def words_to_text(words: Sequence[Word], separator: str = " ") -> str:
    """Surface words joined by separator; whitespace words are dropped."""
    return separator.join(w.text for w in words if w.kind != TokenKind.WHITESPACE)


def words_to_json(text: str, words: Sequence[Word], indent: Optional[int] = None) -> str:
    """Full SegmentationResult as JSON."""
    result = SegmentationResult.from_words(text, words)
    return json.dumps(result.model_dump(), ensure_ascii=False, indent=indent)


def format_token(token) -> str:
    if token.kind == TokenKind.SKIPPED:
        return f"{token.text} (skipped)"
    return f"{token.text} [{token.pos}] p={token.transition_probability:.3g}"


def format_word_info_text(words: Sequence[Word]) -> str:
    """
    One block per non-whitespace word.

    Example:
        * 降っている  [verb+suffix]
          降 [verb] p=0.5
          っている [suffix] p=0.9
    """
    lines = []
    for word in words:
        if word.kind == TokenKind.WHITESPACE:
            continue
        if word.kind == TokenKind.SKIPPED:
            lines.append(f"* {word.text}  (unknown)")
            continue

        tags = "+".join(t.pos for t in word.tokens)
        lines.append(f"* {word.text}  [{tags}]")
        if len(word.tokens) > 1:
            for token in word.tokens:
                lines.append(f"  {format_token(token)}")
        else:
            lines.append(f"  p={word.tokens[0].transition_probability:.3g}")
    return "\n".join(lines)
