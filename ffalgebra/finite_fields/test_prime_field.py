# (C) 2024 Irreducible Inc.

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ffalgebra.errors import ElementOutOfRangeError, FieldMismatchError, InvalidFieldOrderError
from ffalgebra.tests.helpers import random_integers_strategy

from .prime_field import PrimeField, inverse_mod
from .registry import of_order

GF7_ADD = [
    [0, 1, 2, 3, 4, 5, 6],
    [1, 2, 3, 4, 5, 6, 0],
    [2, 3, 4, 5, 6, 0, 1],
    [3, 4, 5, 6, 0, 1, 2],
    [4, 5, 6, 0, 1, 2, 3],
    [5, 6, 0, 1, 2, 3, 4],
    [6, 0, 1, 2, 3, 4, 5],
]

GF7_MUL = [
    [0, 0, 0, 0, 0, 0, 0],
    [0, 1, 2, 3, 4, 5, 6],
    [0, 2, 4, 6, 1, 3, 5],
    [0, 3, 6, 2, 5, 1, 4],
    [0, 4, 1, 5, 2, 6, 3],
    [0, 5, 3, 1, 6, 4, 2],
    [0, 6, 5, 4, 3, 2, 1],
]

GF7_INV = [None, 1, 4, 5, 2, 3, 6]

ORDERS = [2, 3, 4, 7, 8, 9, 16, 25, 27, 49, 243, 256, 2**40, 2**61 - 1]


def test_gf7_tables() -> None:
    field = of_order(7)
    assert isinstance(field, PrimeField)
    for a in range(7):
        for b in range(7):
            assert field[a] + field[b] == field[GF7_ADD[a][b]]
            assert field[a] * field[b] == field[GF7_MUL[a][b]]
            assert field[a] - field[b] == field[(a - b) % 7]
    for a in range(1, 7):
        assert field[a].inverse() == field[GF7_INV[a]]
        assert field[a] / field[a] == field.one()


@pytest.mark.parametrize("order", ORDERS)
def test_field_axioms(order: int) -> None:
    field = of_order(order)
    rng = random.Random(order)
    for _ in range(30):
        a, b, c = field.random(rng), field.random(rng), field.random(rng)
        assert (a + b) + c == a + (b + c)
        assert (a * b) * c == a * (b * c)
        assert a * b == b * a
        assert a * (b + c) == a * b + a * c
        assert a + (-a) == field.zero()
        assert a - b == a + (-b)
        if a:
            assert a * a.inverse() == field.one()
            assert (b / a) * a == b
        assert a**3 == a * a * a
        assert a.square() == a * a


@pytest.mark.parametrize("order", [2, 5, 9, 16])
def test_fermat(order: int) -> None:
    field = of_order(order)
    for a in field:
        assert a**order == a


@given(val=random_integers_strategy(0, 2**61 - 2))
def test_large_prime_inverse(val: int) -> None:
    field = of_order(2**61 - 1)
    a = field.element(val)
    if a:
        assert a * a.inverse() == 1
        assert a.inverse() == a ** (field.order - 2)


@given(n=st.integers(1, 10**6), p=st.sampled_from([2, 3, 101, 65537]))
def test_inverse_mod(n: int, p: int) -> None:
    if n % p:
        assert n * inverse_mod(n, p) % p == 1


def test_inverting_zero() -> None:
    field = of_order(11)
    with pytest.raises(ZeroDivisionError):
        field.zero().inverse()
    with pytest.raises(ZeroDivisionError):
        field.one() / field.zero()
    with pytest.raises(ZeroDivisionError):
        field.zero() ** -1


def test_element_out_of_range() -> None:
    field = of_order(5)
    with pytest.raises(ElementOutOfRangeError):
        field.element(5)
    with pytest.raises(ElementOutOfRangeError):
        field.element(-1)


def test_field_mismatch() -> None:
    with pytest.raises(FieldMismatchError):
        of_order(5).one() + of_order(7).one()
    with pytest.raises(FieldMismatchError):
        of_order(5).multiply(of_order(5).one(), of_order(25).one())


def test_not_prime() -> None:
    with pytest.raises(InvalidFieldOrderError):
        PrimeField(15)


def test_int_coercion() -> None:
    field = of_order(13)
    a = field.element(5)
    assert a + 10 == field.element(2)
    assert 3 * a == field.element(2)
    assert 1 - a == field.element(9)
    assert field.from_int(-1) == field.element(12)
    assert a == 5
    assert int(a) == 5


def test_serialization() -> None:
    field = of_order(2**61 - 1)
    a = field.element(0x123456789ABCDEF)
    assert field.bytes_len == 8
    assert bytes(a) == (0x123456789ABCDEF).to_bytes(8, "little")
    assert field.from_bytes(bytes(a)) == a
    with pytest.raises(ValueError):
        field.from_bytes(b"\x00")


def test_enumeration_and_format() -> None:
    field = of_order(7)
    assert len(field) == 7
    assert [a.value for a in field] == list(range(7))
    assert str(field) == "GF(7)"
    assert str(field[3]) == "3"
    assert field.max() == field[6]


def test_random_small_nonzero() -> None:
    field = of_order(5)
    rng = random.Random(99)
    assert all(field.random_small_nonzero(rng) for _ in range(200))


def test_inverse_without_table() -> None:
    p = 2**31 - 1
    field = PrimeField(p)
    assert field._inverses is None
    a = field.element(123456789)
    assert a * a.inverse() == field.one()
