"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Utility functions - error reporting and input validation
"""

import logging
import string
from typing import Sequence

logger = logging.getLogger(__name__)

WORD_MASK = 0xFFFFFFFF

_HEX_CHARS = frozenset(string.hexdigits)


def error(format_str: str, *args) -> bool:
    """
    Error reporting function

    Formats error message and logs it with "ERROR: " prefix.
    Always returns False for use in return statements.

    Args:
        format_str: Format string (supports %s, %d, etc.)
        *args: Arguments for format string

    Returns:
        Always returns False

    Example:
        if condition:
            return error("Operation failed: %s", reason)
    """
    try:
        message = format_str % args if args else format_str
    except (TypeError, ValueError):
        # Fallback if formatting fails
        message = format_str + " " + " ".join(str(arg) for arg in args)

    logger.error(f"ERROR: {message}")
    return False


def is_word(value) -> bool:
    """True if value fits in an unsigned 32-bit word"""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= WORD_MASK


def check_words(words: Sequence[int], width: int) -> bool:
    """
    Validate a little-word-endian word sequence

    Args:
        words: Candidate words, least significant first
        width: Required number of words

    Returns:
        True if there are exactly `width` words and each fits in 32 bits
    """
    if len(words) != width:
        return error("check_words() : expected %d words, got %d", width, len(words))
    for i, word in enumerate(words):
        if not is_word(word):
            return error("check_words() : word %d out of range: %r", i, word)
    return True


def check_hex(hex_str: str, max_digits: int) -> bool:
    """
    Validate a bare hex digit string

    No prefix, sign or whitespace is accepted. Leading zeros do not count
    towards max_digits.
    """
    for pos, ch in enumerate(hex_str):
        if ch not in _HEX_CHARS:
            return error("check_hex() : invalid hex digit %r at position %d", ch, pos)
    significant = len(hex_str.lstrip("0"))
    if significant > max_digits:
        return error("check_hex() : %d significant digits, at most %d allowed", significant, max_digits)
    return True
