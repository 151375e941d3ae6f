"""
Fixed scoring constants for Wakachi.

These are part of the segmentation model's contract and are deliberately
not read from the environment.
"""

import math

# PoS marker for "no constraint": held from the start of text until the
# path's first dictionary token. Whitespace and skips keep the current tag.
EMPTY_POS: str = ""

# Transition out of an unconstrained state is never penalized.
BOUNDARY_TRANSITION_PROB: float = 1.0

# Known previous PoS, but the (prev, next) pair is absent from the table.
UNKNOWN_TRANSITION_PROB: float = 1e-8

# Consuming one out-of-dictionary character.
SKIP_PROB: float = 1e-8
SKIP_SCORE: float = math.log(SKIP_PROB)

# Whitespace runs pass through with probability 1.0 (log 0.0).
WHITESPACE_PROB: float = 1.0
