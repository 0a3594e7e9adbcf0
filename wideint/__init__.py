"""
wideint - fixed-width 256-bit unsigned integers

A uint256 value is 8 unsigned 32-bit words, least significant first, with
wraparound addition, subtraction, two's-complement negation and rotation.
"""

__version__ = "0.1.0"

import logging

from wideint.uint256 import (
    BITS,
    HEX_DIGITS,
    MAX,
    ONE,
    WIDTH,
    WORD_BITS,
    ZERO,
    ParseError,
    add,
    from_bytes,
    from_hex,
    from_int,
    from_u32,
    from_words,
    get_word,
    negate,
    rotate_left,
    rotate_right,
    sub,
    to_bytes,
    to_hex,
    to_int,
    uint256,
)
from wideint.util import WORD_MASK, error

logging.getLogger("wideint").addHandler(logging.NullHandler())

__all__ = [
    # Type
    "uint256",
    "ParseError",
    # Constants
    "BITS",
    "HEX_DIGITS",
    "WIDTH",
    "WORD_BITS",
    "WORD_MASK",
    "ZERO",
    "ONE",
    "MAX",
    # Construction
    "from_bytes",
    "from_hex",
    "from_int",
    "from_u32",
    "from_words",
    # Inspection
    "get_word",
    "to_bytes",
    "to_hex",
    "to_int",
    # Arithmetic
    "add",
    "negate",
    "sub",
    "rotate_left",
    "rotate_right",
    # Util
    "error",
]
