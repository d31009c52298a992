# (C) 2024 Irreducible Inc.

from __future__ import annotations

import itertools
import math
import random
import threading
from typing import Any, Generic, Iterable, Sequence, TypeVar

from ..errors import MalformedPolynomialError
from ..rings.ring import Ring
from .indeterminate import DEFAULT_INDETERMINATES, Indeterminate, named
from .monomial import Monomial
from .polynomial import Polynomial

R = TypeVar("R")

# Nesting depth of random_small_nonzero calls, selecting the indeterminate of each nested ring.
_random_depth = threading.local()


def _depth() -> int:
    return getattr(_random_depth, "value", 0)


def default_indeterminates(n: int) -> tuple[Indeterminate, ...]:
    if n > len(DEFAULT_INDETERMINATES):
        raise ValueError("ran out of letters for default indeterminates")
    return DEFAULT_INDETERMINATES[:n]


class PolynomialRing(Ring[Polynomial], Generic[R]):
    """The ring of polynomials over a coefficient ring.

    The ring holds no state besides its coefficient ring; it is the factory for polynomials and implements their
    arithmetic generically through the coefficient ring's operations, so it works the same over the integers, over
    finite fields and over other polynomial rings.
    """

    def __init__(self, coefficient_ring: Ring[R]):
        self.coefficient_ring = coefficient_ring
        self._zero = Polynomial(self, (), ())
        self._one = self.constant(coefficient_ring.one())

    # Factories.

    def _term(self, term: Monomial | tuple[Any, Any]) -> Monomial:
        if isinstance(term, Monomial):
            return term
        coefficient, exponents = term
        if isinstance(coefficient, int):
            coefficient = self.coefficient_ring.from_int(coefficient)
        return Monomial(self.coefficient_ring, coefficient, exponents)

    def create(
        self,
        terms: Iterable[Monomial | tuple[Any, Any]],
        indeterminates: Sequence[Indeterminate] | None = None,
    ) -> Polynomial:
        """Builds a polynomial from monomials or (coefficient, exponents) pairs.

        Without explicit indeterminates, the default ones (x, y, z, ...) are used, as many as the widest exponent
        vector needs.
        """
        terms = [self._term(t) for t in terms]
        if indeterminates is None:
            indeterminates = default_indeterminates(max((len(t.exponents) for t in terms), default=0))
        return Polynomial(self, indeterminates, terms)

    def from_coefficients(self, coefficients: Iterable[Any], indeterminate: Indeterminate | None = None) -> Polynomial:
        """Builds a univariate polynomial from its coefficients, least significant first."""
        terms = [self._term((c, i)) for i, c in enumerate(coefficients)]
        return Polynomial(self, (indeterminate or DEFAULT_INDETERMINATES[0],), terms)

    def constant(self, value: Any, indeterminates: Sequence[Indeterminate] = ()) -> Polynomial:
        if isinstance(value, int):
            value = self.coefficient_ring.from_int(value)
        indeterminates = tuple(indeterminates)
        return Polynomial(self, indeterminates, [Monomial(self.coefficient_ring, value, [0] * len(indeterminates))])

    def variable(self, indeterminate: Indeterminate | str = "x") -> Polynomial:
        if isinstance(indeterminate, str):
            indeterminate = named(indeterminate)
        return Polynomial(self, (indeterminate,), [Monomial(self.coefficient_ring, self.coefficient_ring.one(), 1)])

    def from_expression(self, source: str, variables: Sequence[Indeterminate | str] | None = None) -> Polynomial:
        """Parses an expression such as "x^2 + 3*x*y - 1" into a polynomial."""
        from .expression import parse

        return parse(self, source, variables)

    # Ring operations.

    def zero(self) -> Polynomial:
        return self._zero

    def one(self) -> Polynomial:
        return self._one

    def from_int(self, val: int) -> Polynomial:
        return self.constant(self.coefficient_ring.from_int(val))

    def is_zero(self, elem: Polynomial) -> bool:
        return elem.is_zero()

    def align(self, left: Polynomial, right: Polynomial) -> tuple[Polynomial, Polynomial]:
        """Re-expresses both polynomials over the union of their indeterminates, ordered by id."""
        if left.indeterminates == right.indeterminates:
            return left, right
        union = sorted(set(left.indeterminates) | set(right.indeterminates), key=lambda ind: ind.id)
        if len({ind.symbol for ind in union}) < len(union):
            raise ValueError("distinct indeterminates must have distinct symbols")
        return left.align_indeterminates(union), right.align_indeterminates(union)

    def _collect(self, indeterminates: Sequence[Indeterminate], sums: dict[tuple[int, ...], Any]) -> Polynomial:
        ring = self.coefficient_ring
        return Polynomial(self, indeterminates, [Monomial(ring, c, e) for e, c in sums.items()])

    def add(self, left: Polynomial, right: Polynomial) -> Polynomial:
        left, right = self.align(left, right)
        ring = self.coefficient_ring
        sums = {t.exponents: t.coefficient for t in left.terms}
        for t in right.terms:
            c = sums.get(t.exponents)
            sums[t.exponents] = t.coefficient if c is None else ring.add(c, t.coefficient)
        return self._collect(left.indeterminates, sums)

    def negate(self, operand: Polynomial) -> Polynomial:
        return Polynomial(self, operand.indeterminates, [-t for t in operand.terms])

    def multiply(self, left: Polynomial, right: Polynomial) -> Polynomial:
        left, right = self.align(left, right)
        ring = self.coefficient_ring
        sums: dict[tuple[int, ...], Any] = {}
        for a, b in itertools.product(left.terms, right.terms):
            exponents = tuple(x + y for x, y in zip(a.exponents, b.exponents))
            product = ring.multiply(a.coefficient, b.coefficient)
            c = sums.get(exponents)
            sums[exponents] = product if c is None else ring.add(c, product)
        return self._collect(left.indeterminates, sums)

    def multiply_monomial(self, p: Polynomial, m: Monomial) -> Polynomial:
        if len(m.exponents) != len(p.indeterminates):
            raise MalformedPolynomialError("monomial width does not match the polynomial's indeterminates")
        ring = self.coefficient_ring
        terms = [
            Monomial(
                ring,
                ring.multiply(m.coefficient, t.coefficient),
                [x + y for x, y in zip(m.exponents, t.exponents)],
            )
            for t in p.terms
        ]
        return Polynomial(self, p.indeterminates, terms)

    def scale_polynomial(self, p: Polynomial, c: Any) -> Polynomial:
        """Multiplies every coefficient by the scalar c."""
        ring = self.coefficient_ring
        terms = [Monomial(ring, ring.multiply(c, t.coefficient), t.exponents) for t in p.terms]
        return Polynomial(self, p.indeterminates, terms)

    @property
    def elements_have_sign(self) -> bool:
        return False

    def random_small_nonzero(self, rng: random.Random) -> Polynomial:
        count = int(2 - math.log(1 - rng.random()))
        terms = []
        for i in itertools.count():
            if len(terms) == count:
                break
            if rng.randrange(3) > 0:
                terms.append(Monomial(self.coefficient_ring, self._random_coefficient(rng), i))
        return Polynomial(self, (DEFAULT_INDETERMINATES[_depth()],), terms)

    def _random_coefficient(self, rng: random.Random):
        _random_depth.value = _depth() + 1
        try:
            return self.coefficient_ring.random_small_nonzero(rng)
        finally:
            _random_depth.value -= 1

    def as_multivariate(self) -> MultivariatePolynomialRing:
        return MultivariatePolynomialRing(self.coefficient_ring)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PolynomialRing):
            return NotImplemented
        return self.coefficient_ring == other.coefficient_ring

    def __hash__(self) -> int:
        return hash(("PolynomialRing", self.coefficient_ring))

    def __str__(self) -> str:
        return f"{self.coefficient_ring}[x]"


class MultivariatePolynomialRing(PolynomialRing[R]):
    """A polynomial ring whose random elements are bivariate."""

    def random_small_nonzero(self, rng: random.Random) -> Polynomial:
        count = int(2 - math.log(1 - rng.random()))
        terms = []
        for d in itertools.count():
            firsts = list(range(d + 1))
            rng.shuffle(firsts)
            for i in firsts:
                if len(terms) == count:
                    break
                if rng.randrange(3) > 0:
                    terms.append(Monomial(self.coefficient_ring, self._random_coefficient(rng), (i, d - i)))
            if len(terms) == count:
                break
        return Polynomial(self, DEFAULT_INDETERMINATES[:2], terms)

    def __str__(self) -> str:
        return f"{self.coefficient_ring}[x, y]"
