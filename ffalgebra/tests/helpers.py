# (C) 2024 Irreducible Inc.

from hypothesis import strategies as st

from ffalgebra.finite_fields.finite_field import FiniteField, FiniteFieldElem
from ffalgebra.polynomials.field_polynomial_ring import FieldPolynomialRing
from ffalgebra.polynomials.polynomial import Polynomial


def random_integers_strategy(
    min_value: int,
    max_value: int,
) -> st.SearchStrategy[int]:
    return st.builds(lambda rng: rng.randint(min_value, max_value), st.randoms(use_true_random=True))


def elements(field: FiniteField, nonzero: bool = False) -> st.SearchStrategy[FiniteFieldElem]:
    return st.integers(1 if nonzero else 0, field.order - 1).map(field.element)


def polynomials(
    ring: FieldPolynomialRing,
    max_degree: int,
    nonzero: bool = False,
) -> st.SearchStrategy[Polynomial]:
    field = ring.coefficient_ring
    coefficients = st.lists(elements(field), min_size=0, max_size=max_degree + 1)
    strategy = coefficients.map(ring.from_coefficients)
    if nonzero:
        strategy = strategy.filter(lambda p: not p.is_zero())
    return strategy
