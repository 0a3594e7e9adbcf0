"""
Algebraic properties checked over seeded random values
"""

import random

import pytest

from .context import wideint

MODULUS = 1 << 256


def _random_values(seed, count=20):
    rng = random.Random(seed)
    values = [wideint.ZERO, wideint.ONE, wideint.MAX]
    for _ in range(count):
        # mix of dense values and values with sparse all-ones / all-zeros words
        words = [rng.choice([0, 0xFFFFFFFF, rng.getrandbits(32)]) for _ in range(8)]
        values.append(wideint.from_words(words))
    return values


VALUES = _random_values(1)
PAIRS = list(zip(VALUES, _random_values(2)))
TRIPLES = list(zip(VALUES, _random_values(2), _random_values(3)))


@pytest.mark.parametrize("v", VALUES)
def test_additive_identity(v):
    """Test v + 0 == v"""
    assert wideint.add(v, wideint.ZERO) == v


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_commutative(a, b):
    """Test a + b == b + a"""
    assert wideint.add(a, b) == wideint.add(b, a)


@pytest.mark.parametrize("a,b,c", TRIPLES)
def test_add_associative(a, b, c):
    """Test (a + b) + c == a + (b + c)"""
    assert wideint.add(wideint.add(a, b), c) == wideint.add(a, wideint.add(b, c))


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_sub_match_int(a, b):
    """Test add and sub agree with Python ints modulo 2**256"""
    assert wideint.add(a, b).to_int() == (a.to_int() + b.to_int()) % MODULUS
    assert wideint.sub(a, b).to_int() == (a.to_int() - b.to_int()) % MODULUS


@pytest.mark.parametrize("v", VALUES)
def test_negate_is_additive_inverse(v):
    """Test v + (-v) == 0"""
    assert wideint.add(v, wideint.negate(v)) == wideint.ZERO
    assert wideint.sub(v, v) == wideint.ZERO


@pytest.mark.parametrize("v", VALUES)
@pytest.mark.parametrize("nbits", [0, 1, 4, 31, 32, 33, 63, 64, 100, 255, 256, 257, 511, 1000, 10**30])
def test_rotate_round_trip(v, nbits):
    """Test rotate_right undoes rotate_left and amounts reduce modulo 256"""
    rotated = wideint.rotate_left(v, nbits)
    assert wideint.rotate_right(rotated, nbits) == v
    assert rotated == wideint.rotate_left(v, nbits % 256)

    n = v.to_int()
    shift = nbits % 256
    expected = ((n << shift) | (n >> (256 - shift))) % MODULUS
    assert rotated.to_int() == expected


@pytest.mark.parametrize("v", VALUES)
def test_hex_round_trip(v):
    """Test from_hex(to_hex(v)) == v"""
    assert wideint.from_hex(wideint.to_hex(v)) == v
    assert wideint.to_hex(v) == format(v.to_int(), "x")
