"""
Wakachi: dictionary-driven word segmentation and PoS tagging
for text written without spaces between words.
"""

import time
from typing import List, Tuple

__version__ = "0.1.0"


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Load the active dictionary ahead of the first analyze() call.

    Args:
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Example:
        >>> import wakachi
        >>> elapsed, details = wakachi.warm_up(verbose=True)
        Warming up wakachi...
          Dictionary:      12.3ms
        Total warm-up:     12.3ms
    """
    from wakachi.context import get_context

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Warming up wakachi...")

    t0 = time.perf_counter()
    get_context()
    timings['dictionary'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Dictionary:     {timings['dictionary']:>7.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings


def analyze(text: str, context=None) -> List:
    """
    Segment text into PoS-tagged words.

    This is the main high-level API.

    Args:
        text: Text to segment.
        context: Optional SegmenterContext. If None, the active context is
            used, loading the configured dictionary on first call.

    Returns:
        List of Word objects covering the whole text.

    Example:
        >>> import wakachi
        >>> for word in wakachi.analyze("今日は雨が降っている"):
        ...     print(word.text, word.pos)
    """
    from wakachi.context import get_context

    if context is None:
        context = get_context()
    return context.segment(text)
