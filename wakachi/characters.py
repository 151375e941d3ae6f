"""
Character classification for Wakachi.

Whitespace follows the ECMAScript ``\\s`` class, so dictionaries built for
the browser front end segment identically here.
"""

import re

# ============================================================================
# Whitespace
# ============================================================================

# ASCII controls, NBSP, Ogham space, en/em spaces, line/paragraph
# separators, narrow NBSP, medium math space, ideographic space, BOM
WHITESPACE_CHARACTERS = (
    "\t\n\v\f\r "
    "\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

WHITESPACE_REGEX = re.compile("[" + re.escape(WHITESPACE_CHARACTERS) + "]+")


def is_whitespace(char: str) -> bool:
    """Check if a single character is whitespace."""
    return len(char) == 1 and char in WHITESPACE_CHARACTERS


def whitespace_run_end(text: str, start: int) -> int:
    """
    Find the end of the whitespace run beginning at ``start``.

    Args:
        text: Input text.
        start: Index to scan from.

    Returns:
        Index one past the last whitespace character of the run, or
        ``start`` itself if ``text[start]`` is not whitespace.
    """
    match = WHITESPACE_REGEX.match(text, start)
    return match.end() if match else start
