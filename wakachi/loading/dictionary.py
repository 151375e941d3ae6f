"""
JSON dictionary loader.

The dictionary is one JSON document:

    {
      "morphs": [{"morph": "今日", "pos": "noun"}, ...],
      "transitions": {"noun": {"particle": 0.5}, ...},
      "recombination": {"verb": ["suffix"], ...}
    }

``transitions`` and ``recombination`` may be omitted. Validation happens
here, once, so the engine can trust every probability it reads.
"""

import json
import logging
import time
from pathlib import Path
from typing import Annotated, Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from wakachi.context import SegmenterContext
from wakachi.errors import DictionaryError
from wakachi.types import Morph

logger = logging.getLogger(__name__)

# Probabilities of exactly 0 would send a path score to -inf
Probability = Annotated[float, Field(gt=0.0, le=1.0)]


class MorphEntry(BaseModel):
    """One (surface, PoS) dictionary fact."""
    morph: str = Field(..., min_length=1, description="Surface text")
    pos: str = Field(..., min_length=1, description="Part-of-speech tag")


class DictionaryFile(BaseModel):
    """Schema of a dictionary JSON document."""
    morphs: List[MorphEntry] = Field(default_factory=list)
    transitions: Dict[str, Dict[str, Probability]] = Field(default_factory=dict)
    recombination: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("transitions", "recombination")
    @classmethod
    def no_empty_tags(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        for pos, targets in value.items():
            if not pos or any(not t for t in targets):
                raise ValueError("PoS tags must be non-empty strings")
        return value


def parse_dictionary(data: Mapping[str, Any],
                     source: Optional[Union[str, Path]] = None) -> SegmenterContext:
    """
    Validate a decoded dictionary document and build a context from it.

    Args:
        data: Decoded JSON object.
        source: Origin of the data, used in errors and logs.

    Raises:
        DictionaryError: If the document does not match the schema.
    """
    try:
        parsed = DictionaryFile.model_validate(data)
    except ValidationError as e:
        raise DictionaryError(f"Invalid dictionary: {e}", source) from e

    ctx = SegmenterContext.build(
        (Morph(m.morph, m.pos) for m in parsed.morphs),
        transitions=parsed.transitions,
        recombination=parsed.recombination,
        source=str(source) if source is not None else None,
    )
    logger.info(
        "Loaded dictionary %s: %d morphs, %d tags, %d transitions, %d recombination rules",
        source or "<memory>", len(ctx.trie), len(ctx.tag_index) - 1,
        len(ctx.transitions), len(ctx.recombination),
    )
    return ctx


def load_dictionary(path: Union[str, Path]) -> SegmenterContext:
    """
    Load a dictionary JSON file into a new SegmenterContext.

    Raises:
        DictionaryError: If the file cannot be read, is not JSON, or does
            not match the schema.
    """
    path = Path(path)
    t0 = time.perf_counter()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DictionaryError(f"Cannot read dictionary: {e.strerror or e}", path) from e
    except json.JSONDecodeError as e:
        raise DictionaryError(f"Malformed JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise DictionaryError("Dictionary root must be a JSON object", path)

    ctx = parse_dictionary(data, path)
    logger.debug("Dictionary %s built in %.1fms", path, (time.perf_counter() - t0) * 1000)
    return ctx
