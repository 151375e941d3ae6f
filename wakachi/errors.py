"""
Exception hierarchy for Wakachi.
"""

from pathlib import Path
from typing import Optional, Union


class WakachiError(Exception):
    """Base class for all errors raised by wakachi."""


class DictionaryError(WakachiError):
    """A dictionary file could not be read or failed validation."""

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
        self.source = str(source) if source is not None else None
        if self.source:
            message = f"{self.source}: {message}"
        super().__init__(message)


class SegmentationInvariantError(WakachiError):
    """
    The DP table has no state at the end of the text.

    The skip rule always offers a way forward, so this indicates a broken
    model or engine, not bad user input.
    """
