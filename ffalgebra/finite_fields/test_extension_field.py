# (C) 2024 Irreducible Inc.

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from . import galois_interop
from .extension_field import ExtensionField
from .prime_field import PrimeField
from .registry import FieldRegistry, of_order
from .utils import addition_table, inverse_table, multiplication_table, negation_table


def test_gf9_scenario() -> None:
    field = of_order(9)
    assert isinstance(field, ExtensionField)
    assert field.characteristic == 3
    assert field.degree == 2
    # modulus x^2 + 1, so α^2 = -1
    assert [c.value for c in field.modulus] == [1, 0, 1]

    a = field.element(4)  # 1 + α
    b = field.element(5)  # 2 + α
    assert field.coefficients(a) == [field.base_field[1], field.base_field[1]]
    assert a + b == field.element(6)  # 0 + 2α
    assert a * b == field.element(1)  # 2 + 3α + α^2 = 1
    assert a.inverse() == b
    assert str(a) == "1 + α"
    assert str(field.element(7)) == "1 + 2α"
    assert str(field) == "GF(3^2)"


@pytest.mark.parametrize("order", [9, 25, 27, 49, 81, 125, 243])
def test_matches_galois(order: int) -> None:
    field = of_order(order)
    reference = galois_interop.to_galois_field(field)
    codes = np.arange(field.order)
    x = reference(codes)

    add = addition_table(field)
    mul = multiplication_table(field)
    assert np.array_equal(add, np.array((x[:, None] + x[None, :]).tolist()))
    assert np.array_equal(mul, np.array((x[:, None] * x[None, :]).tolist()))
    assert np.array_equal(negation_table(field), np.array((-x).tolist()))
    assert np.array_equal(inverse_table(field)[1:], np.array((x[1:] ** -1).tolist()))


def test_galois_round_trip() -> None:
    field = of_order(27)
    elems = [field.element(v) for v in (0, 1, 5, 26)]
    array = galois_interop.to_galois_array(field, elems)
    assert galois_interop.from_galois_array(field, array) == elems


@settings(deadline=None)
@given(p=st.sampled_from([3, 5, 7]), n=st.integers(2, 4), data=st.data())
def test_generator_is_root_of_modulus(p: int, n: int, data) -> None:
    field = ExtensionField.of_degree(PrimeField(p), n)
    alpha = field.generator()
    acc = field.zero()
    for i, c in enumerate(field.modulus):
        acc += alpha**i * c.value
    assert acc == field.zero()

    a = field.element(data.draw(st.integers(1, field.order - 1)))
    assert a ** (field.order - 1) == field.one()


def test_from_int_is_canonical() -> None:
    field = of_order(49)
    assert field.from_int(9) == field.element(2)
    assert field.from_int(-1) == -field.one()
    assert field.from_coefficients([3, 1]) == field.element(3 + 7)


def test_rejects_bad_moduli() -> None:
    gf3 = PrimeField(3)
    with pytest.raises(ValueError):
        ExtensionField(gf3, [2, 0, 1])  # x^2 + 2 = (x + 1)(x + 2)
    with pytest.raises(ValueError):
        ExtensionField(gf3, [1, 0, 2])  # not monic
    with pytest.raises(ValueError):
        ExtensionField(gf3, [1, 1])  # degree 1


def test_custom_modulus() -> None:
    field = ExtensionField(PrimeField(3), [2, 1, 1])  # x^2 + x + 2
    alpha = field.generator()
    assert alpha * alpha == field.from_coefficients([1, 2])  # α^2 = -α - 2 = 1 + 2α
    assert field == of_order(9)
    assert field.is_isomorphic(of_order(9))


def test_registry_uses_base_field() -> None:
    registry = FieldRegistry()
    field = registry.of_order(125)
    assert isinstance(field, ExtensionField)
    assert 5 in registry
    assert field.base_field is registry.of_order(5)
