"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

256-bit unsigned integer implementation
"""

import struct
from typing import Iterable, Tuple

from wideint.util import WORD_MASK, check_hex, check_words, error, is_word

WIDTH = 8  # 8 * 32 bits = 256 bits
WORD_BITS = 32
BITS = WIDTH * WORD_BITS
HEX_DIGITS = BITS // 4


class ParseError(ValueError):
    """Raised when a hex string cannot be parsed into a uint256"""


class uint256:
    """
    256-bit unsigned integer

    Stored as a tuple of 8 unsigned 32-bit words in `pn`, index 0 least
    significant. Values are immutable; every operation returns a new value.
    """

    __slots__ = ("pn",)

    WIDTH = WIDTH

    def __init__(self, value=0):
        if isinstance(value, uint256):
            words = value.pn
        elif isinstance(value, str):
            if value[:2] in ("0x", "0X"):
                value = value[2:]
            words = from_hex(value).pn
        elif isinstance(value, bool):
            raise TypeError("Cannot build uint256 from bool")
        elif isinstance(value, int):
            words = from_int(value).pn
        elif isinstance(value, bytes):
            words = from_bytes(value).pn
        elif isinstance(value, (list, tuple)):
            words = from_words(value).pn
        else:
            raise TypeError(f"Cannot build uint256 from {type(value).__name__}")
        self.pn = words

    @classmethod
    def _make(cls, words: Iterable[int]) -> "uint256":
        """Wrap already-validated words without re-checking them"""
        result = cls.__new__(cls)
        result.pn = tuple(words)
        return result

    def __eq__(self, other):
        if isinstance(other, uint256):
            return self.pn == other.pn
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _compare(self, other) -> int:
        for i in range(WIDTH - 1, -1, -1):
            if self.pn[i] < other.pn[i]:
                return -1
            elif self.pn[i] > other.pn[i]:
                return 1
        return 0

    def __lt__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return self._compare(other) >= 0

    def __and__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return uint256._make(a & b for a, b in zip(self.pn, other.pn))

    def __or__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return uint256._make(a | b for a, b in zip(self.pn, other.pn))

    def __xor__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return uint256._make(a ^ b for a, b in zip(self.pn, other.pn))

    def __invert__(self):
        return uint256._make(~word & WORD_MASK for word in self.pn)

    def __lshift__(self, shift):
        if not isinstance(shift, int):
            return NotImplemented
        if shift < 0:
            raise ValueError("Negative shift count")
        result = [0] * WIDTH
        k = shift // WORD_BITS
        shift = shift % WORD_BITS
        for i in range(WIDTH):
            if i + k + 1 < WIDTH and shift != 0:
                result[i + k + 1] |= self.pn[i] >> (WORD_BITS - shift)
            if i + k < WIDTH:
                result[i + k] |= (self.pn[i] << shift) & WORD_MASK
        return uint256._make(result)

    def __rshift__(self, shift):
        if not isinstance(shift, int):
            return NotImplemented
        if shift < 0:
            raise ValueError("Negative shift count")
        result = [0] * WIDTH
        k = shift // WORD_BITS
        shift = shift % WORD_BITS
        for i in range(WIDTH):
            if i - k - 1 >= 0 and shift != 0:
                result[i - k - 1] |= (self.pn[i] << (WORD_BITS - shift)) & WORD_MASK
            if i - k >= 0:
                result[i - k] |= self.pn[i] >> shift
        return uint256._make(result)

    def __add__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, uint256):
            return NotImplemented
        return sub(self, other)

    def __neg__(self):
        return negate(self)

    def __bool__(self):
        return any(self.pn)

    def __int__(self):
        return self.to_int()

    def __getitem__(self, index):
        return get_word(self, index)

    def __iter__(self):
        return iter(self.pn)

    def __len__(self):
        return WIDTH

    def rotate_left(self, nbits: int) -> "uint256":
        return rotate_left(self, nbits)

    def rotate_right(self, nbits: int) -> "uint256":
        return rotate_right(self, nbits)

    def get_word(self, index: int) -> int:
        return get_word(self, index)

    def get_hex(self) -> str:
        """Get minimal lowercase hex string representation"""
        return to_hex(self)

    def to_int(self) -> int:
        return to_int(self)

    def to_bytes(self) -> bytes:
        return to_bytes(self)

    def words(self) -> Tuple[int, ...]:
        return self.pn

    def __str__(self):
        return self.get_hex()

    def __repr__(self):
        return f"uint256('0x{self.get_hex()}')"

    def __hash__(self):
        return hash(self.pn)


def from_u32(value: int) -> uint256:
    """Create a uint256 whose least significant word is value"""
    if not is_word(value):
        raise ValueError(f"Value {value!r} does not fit in 32 bits")
    return uint256._make((value,) + (0,) * (WIDTH - 1))


def from_words(words) -> uint256:
    """
    Create a uint256 from 8 unsigned 32-bit words

    The element at index 0 is the least significant, and the element at
    index 7 is the most significant.
    """
    words = tuple(words)
    if not check_words(words, WIDTH):
        raise ValueError(f"Expected {WIDTH} unsigned 32-bit words, got {words!r}")
    return uint256._make(words)


def from_int(value: int) -> uint256:
    """Create a uint256 from a Python int in [0, 2**256 - 1]"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if not 0 <= value < (1 << BITS):
        raise ValueError(f"Value {value} out of range for 256 bits")
    return uint256._make((value >> (WORD_BITS * i)) & WORD_MASK for i in range(WIDTH))


def from_bytes(data: bytes) -> uint256:
    """Create a uint256 from 32 little-endian bytes"""
    if len(data) != WIDTH * 4:
        raise ValueError(f"Expected {WIDTH * 4} bytes, got {len(data)}")
    return uint256._make(struct.unpack("<8I", data))


def from_hex(hex_str: str) -> uint256:
    """
    Create a uint256 from a string of hexadecimal digits

    The string is read right to left, 8 digits per word, starting with the
    least significant word. The leftmost group may be shorter than 8 digits.
    An empty string gives zero.

    Raises:
        ParseError: on a non-hex character or more than 64 significant digits
    """
    if not isinstance(hex_str, str):
        raise TypeError(f"Expected str, got {type(hex_str).__name__}")
    if not check_hex(hex_str, HEX_DIGITS):
        raise ParseError(f"Invalid uint256 hex string {hex_str!r}")

    words = [0] * WIDTH
    end = len(hex_str)
    for i in range(WIDTH):
        if end <= 0:
            break
        start = max(0, end - 8)
        words[i] = int(hex_str[start:end], 16)
        end = start
    return uint256._make(words)


def to_hex(val: uint256) -> str:
    """
    Format val as lowercase hex digits without a prefix

    Leading zeros are trimmed; zero formats as "0".
    """
    hex_str = "".join(f"{word:08x}" for word in reversed(val.pn))
    return hex_str.lstrip("0") or "0"


def to_int(val: uint256) -> int:
    n = 0
    for word in reversed(val.pn):
        n = (n << WORD_BITS) | word
    return n


def to_bytes(val: uint256) -> bytes:
    """Convert to 32-byte little-endian bytes"""
    return struct.pack("<8I", *val.pn)


def get_word(val: uint256, index: int) -> int:
    """
    Get 32 bits of data from a uint256 value

    Index 0 is the least significant word, index 7 the most significant.
    """
    if not isinstance(index, int) or not 0 <= index < WIDTH:
        error("get_word() : index %r out of range", index)
        raise IndexError(f"uint256 word index {index!r} out of range 0..{WIDTH - 1}")
    return val.pn[index]


def add(left: uint256, right: uint256) -> uint256:
    """Sum of two uint256 values, modulo 2**256"""
    result = [0] * WIDTH
    carry = 0
    for i in range(WIDTH):
        n = carry + left.pn[i] + right.pn[i]
        result[i] = n & WORD_MASK
        carry = n >> WORD_BITS
    # carry out of the top word is dropped
    return uint256._make(result)


def negate(val: uint256) -> uint256:
    """Two's-complement negation"""
    return add(~val, ONE)


def sub(left: uint256, right: uint256) -> uint256:
    """Difference of two uint256 values, wrapping on underflow"""
    return add(left, negate(right))


def _rotation(nbits: int) -> Tuple[int, int]:
    if isinstance(nbits, bool) or not isinstance(nbits, int):
        raise TypeError(f"Rotation amount must be int, got {type(nbits).__name__}")
    nbits %= BITS
    return nbits // WORD_BITS, nbits % WORD_BITS


def rotate_left(val: uint256, nbits: int) -> uint256:
    """
    Rotate every bit in val nbits to the left

    Bits shifted past the most significant bit come back in at the least
    significant bit. nbits is taken modulo 256.
    """
    word_shift, bit_shift = _rotation(nbits)
    pn = val.pn
    result = [0] * WIDTH
    for i in range(WIDTH):
        word = pn[(i - word_shift) % WIDTH] << bit_shift
        if bit_shift:
            word |= pn[(i - word_shift - 1) % WIDTH] >> (WORD_BITS - bit_shift)
        result[i] = word & WORD_MASK
    return uint256._make(result)


def rotate_right(val: uint256, nbits: int) -> uint256:
    """
    Rotate every bit in val nbits to the right

    Bits shifted past the least significant bit come back in at the most
    significant bit. nbits is taken modulo 256.
    """
    word_shift, bit_shift = _rotation(nbits)
    pn = val.pn
    result = [0] * WIDTH
    for i in range(WIDTH):
        word = pn[(i + word_shift) % WIDTH] >> bit_shift
        if bit_shift:
            word |= pn[(i + word_shift + 1) % WIDTH] << (WORD_BITS - bit_shift)
        result[i] = word & WORD_MASK
    return uint256._make(result)


ZERO = from_u32(0)
ONE = from_u32(1)
MAX = from_words([WORD_MASK] * WIDTH)
