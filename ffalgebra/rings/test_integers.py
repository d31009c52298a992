# (C) 2024 Irreducible Inc.

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from .integers import INT32, INT32_MAX, INT32_MIN, ZZ


@given(a=st.integers(), b=st.integers(), c=st.integers())
def test_integer_ring_axioms(a: int, b: int, c: int) -> None:
    assert ZZ.add(ZZ.add(a, b), c) == ZZ.add(a, ZZ.add(b, c))
    assert ZZ.multiply(a, ZZ.add(b, c)) == ZZ.add(ZZ.multiply(a, b), ZZ.multiply(a, c))
    assert ZZ.add(a, ZZ.negate(a)) == ZZ.zero()
    assert ZZ.subtract(a, b) == a - b


@given(base=st.integers(-50, 50), exponent=st.integers(0, 30))
def test_pow(base: int, exponent: int) -> None:
    assert ZZ.pow(base, exponent) == base**exponent


def test_negative_pow_rejected() -> None:
    with pytest.raises(ValueError):
        ZZ.pow(2, -1)


def test_int32_overflow() -> None:
    assert INT32.add(INT32_MAX - 1, 1) == INT32_MAX
    with pytest.raises(OverflowError):
        INT32.add(INT32_MAX, 1)
    with pytest.raises(OverflowError):
        INT32.negate(INT32_MIN)
    with pytest.raises(OverflowError):
        INT32.multiply(1 << 16, 1 << 16)


def test_ring_equality() -> None:
    assert ZZ != INT32
    assert INT32 == type(INT32)()
    assert str(ZZ) == "ZZ"


def test_random_small_nonzero() -> None:
    rng = random.Random(1234)
    values = [ZZ.random_small_nonzero(rng) for _ in range(500)]
    assert all(v != 0 for v in values)
    assert any(v < 0 for v in values) and any(v > 0 for v in values)
    assert ZZ.sign(-3) == -1 and ZZ.sign(0) == 0 and ZZ.sign(5) == 1


def test_groups() -> None:
    group = ZZ.additive_group
    assert group.identity == 0
    assert group.op(3, 4) == 7
    assert group.invert(5) == -5
