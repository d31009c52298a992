# (C) 2024 Irreducible Inc.

from __future__ import annotations

import itertools
import logging
import random
from typing import Any, Iterator

from ..config import EDF_MAX_ATTEMPTS
from ..errors import RetryExhaustedError
from ..finite_fields.finite_field import FiniteField
from ..rings.ring import Field
from ..utils.utils import prime_factors
from .indeterminate import DEFAULT_INDETERMINATES, Indeterminate
from .monomial import Monomial
from .polynomial import Polynomial
from .polynomial_ring import PolynomialRing

logger = logging.getLogger(__name__)


class FieldPolynomialRing(PolynomialRing):
    """Univariate polynomials over a field.

    On top of the ring operations this provides division with remainder, greatest common divisors and modular
    exponentiation, and, when the coefficient field is finite, irreducibility testing and factorization into
    irreducible factors.
    """

    def __init__(self, coefficient_field: Field):
        if not isinstance(coefficient_field, Field):
            raise TypeError(f"{coefficient_field} is not a field")
        super().__init__(coefficient_field)

    @property
    def field(self) -> Field:
        return self.coefficient_ring

    def _finite_field(self) -> FiniteField:
        if not isinstance(self.coefficient_ring, FiniteField):
            raise TypeError(f"{self.coefficient_ring} is not a finite field")
        return self.coefficient_ring

    def _univariate(self, *polys: Polynomial) -> tuple[Indeterminate, list[Polynomial]]:
        """Aligns polynomials on a single shared indeterminate."""
        trimmed = [p.trim_indeterminates() for p in polys]
        indeterminates = {ind for p in trimmed for ind in p.indeterminates}
        if len(indeterminates) > 1:
            raise NotImplementedError("only univariate polynomials are supported")
        if indeterminates:
            ind = indeterminates.pop()
        else:
            ind = next((p.indeterminates[0] for p in polys if p.indeterminates), DEFAULT_INDETERMINATES[0])
        return ind, [p.align_indeterminates((ind,)) for p in trimmed]

    def _dense(self, p: Polynomial) -> list:
        zero = self.field.zero()
        out = [zero] * (p.degree + 1)
        for t in p.terms:
            out[t.degree] = t.coefficient
        return out

    def _from_dense(self, coefficients: list, ind: Indeterminate) -> Polynomial:
        return Polynomial(self, (ind,), [Monomial(self.field, c, i) for i, c in enumerate(coefficients)])

    def x(self, ind: Indeterminate | None = None) -> Polynomial:
        return self.variable(ind or DEFAULT_INDETERMINATES[0])

    # Division.

    def divmod(self, left: Polynomial, right: Polynomial) -> tuple[Polynomial, Polynomial]:
        """Polynomial long division: returns (q, r) with left = q * right + r and deg r < deg right."""
        ind, (left, right) = self._univariate(left, right)
        if right.is_zero():
            raise ZeroDivisionError("polynomial division by zero")
        field = self.field
        r = self._dense(left)
        d = self._dense(right)
        n = right.degree
        lc_inv = field.inverse(d[-1])

        q = [field.zero()] * max(len(r) - n, 0)
        for k in range(len(r) - n - 1, -1, -1):
            c = field.multiply(r[k + n], lc_inv)
            if field.is_zero(c):
                continue
            q[k] = c
            for j, dj in enumerate(d):
                r[k + j] = field.subtract(r[k + j], field.multiply(c, dj))

        return self._from_dense(q, ind), self._from_dense(r[:n], ind)

    def divide(self, left: Polynomial, right: Polynomial) -> Polynomial:
        return self.divmod(left, right)[0]

    def mod(self, left: Polynomial, right: Polynomial) -> Polynomial:
        return self.divmod(left, right)[1]

    def divide_scalar(self, p: Polynomial, c: Any) -> Polynomial:
        return self.scale_polynomial(p, self.field.inverse(c))

    def gcd(self, a: Polynomial, b: Polynomial) -> Polynomial:
        """Euclid's algorithm. The result is not normalized; see monic()."""
        while not b.is_zero():
            a, b = b, self.mod(a, b)
        return a

    def monic(self, p: Polynomial) -> Polynomial:
        if p.is_zero() or p.leading_coefficient == self.field.one():
            return p
        return self.divide_scalar(p, p.leading_coefficient)

    def mod_pow(self, p: Polynomial, exponent: int, modulus: Polynomial) -> Polynomial:
        if exponent < 0:
            raise ValueError("negative exponent")
        acc = self.one()
        base = self.mod(p, modulus)
        while exponent:
            if exponent & 1:
                acc = self.mod(self.multiply(acc, base), modulus)
            exponent >>= 1
            if exponent:
                base = self.mod(self.multiply(base, base), modulus)
        return self.mod(acc, modulus)

    # Finite field algorithms.

    def _frobenius(self, h: Polynomial, k: int, modulus: Polynomial) -> Polynomial:
        """Returns h^(q^k) mod modulus, where q is the order of the coefficient field."""
        q = self._finite_field().order
        for _ in range(k):
            h = self.mod_pow(h, q, modulus)
        return h

    def is_irreducible(self, f: Polynomial) -> bool:
        """Rabin's test over the coefficient field GF(q)."""
        self._finite_field()
        ind, (f,) = self._univariate(f)
        n = f.degree
        if n < 1:
            return False
        f = self.monic(f)
        x = self.mod(self.x(ind), f)

        for r in prime_factors(n):
            h = self._frobenius(x, n // r, f)
            if self.gcd(f, self.subtract(h, x)).degree != 0:
                return False

        return self._frobenius(x, n, f) == x

    def distinct_degree_factorization(self, f: Polynomial) -> list[Polynomial]:
        """Splits a monic square-free polynomial by the degrees of its irreducible factors.

        Returns a list gs of length deg f where gs[d - 1] is the product of the irreducible factors of degree d, or 1
        when there are none.
        """
        ind, (f,) = self._univariate(f)
        n = f.degree
        gs = [self.one()] * max(n, 0)
        x = self.x(ind)
        rest = f
        h = self.mod(x, rest)
        d = 1

        while 2 * d <= rest.degree:
            h = self._frobenius(h, 1, rest)
            g = self.monic(self.gcd(rest, self.subtract(h, x)))
            if g.degree > 0:
                gs[d - 1] = g
                rest = self.divide(rest, g)
                h = self.mod(h, rest)
            d += 1

        if rest.degree > 0:
            gs[rest.degree - 1] = rest
        return gs

    def _random_below(self, degree: int, ind: Indeterminate, rng: random.Random) -> Polynomial:
        field = self._finite_field()
        return self._from_dense([field.random(rng) for _ in range(degree)], ind)

    def _splitting_polynomial(self, a: Polynomial, d: int, g: Polynomial) -> Polynomial:
        field = self._finite_field()
        q = field.order
        if q % 2:
            return self.add(self.mod_pow(a, (q**d - 1) // 2, g), self.one())
        # absolute trace from GF(q^d) down to GF(2)
        t = self.mod(a, g)
        s = t
        for _ in range(field.degree * d - 1):
            t = self.mod(self.multiply(t, t), g)
            s = self.add(s, t)
        return s

    def equal_degree_factorization(
        self, g: Polynomial, d: int, rng: random.Random | None = None
    ) -> Iterator[Polynomial]:
        """Cantor-Zassenhaus splitting of a monic product of distinct irreducible factors, all of degree d."""
        rng = rng or random.Random()
        ind, (g,) = self._univariate(g)
        pending = [g]

        while pending:
            gi = pending.pop()
            if gi.degree <= d:
                if gi.degree > 0:
                    yield gi
                continue

            for attempt in range(1, EDF_MAX_ATTEMPTS + 1):
                a = self._random_below(gi.degree, ind, rng)
                if a.degree < 1:
                    continue
                s = self.monic(self.gcd(gi, a))
                if s.degree == 0:
                    s = self.monic(self.gcd(gi, self._splitting_polynomial(a, d, gi)))
                if 0 < s.degree < gi.degree:
                    logger.debug(
                        "split degree %d product into %d + %d after %d draws",
                        gi.degree,
                        s.degree,
                        gi.degree - s.degree,
                        attempt,
                    )
                    pending.append(s)
                    pending.append(self.divide(gi, s))
                    break
            else:
                raise RetryExhaustedError(f"no split of a degree {gi.degree} product after {EDF_MAX_ATTEMPTS} draws")

    def _pth_root(self, f: Polynomial) -> Polynomial:
        """Returns r with r^p = f, for f whose exponents are all multiples of the characteristic p."""
        field = self._finite_field()
        p = field.characteristic
        root_exponent = field.order // p
        terms = [Monomial(field, field.pow(t.coefficient, root_exponent), t.degree // p) for t in f.terms]
        return Polynomial(self, f.indeterminates, terms)

    def factorize(self, f: Polynomial, rng: random.Random | None = None) -> Iterator[Polynomial]:
        """Factors a nonzero univariate polynomial over a finite field.

        Yields the leading coefficient as a constant polynomial unless it is 1, then x^k if x^k divides f with k > 0,
        then the remaining monic irreducible factors with multiplicity, in no particular order. The product of
        everything yielded is f.
        """
        self._finite_field()
        rng = rng or random.Random()
        ind, (f,) = self._univariate(f)
        if f.is_zero():
            raise ValueError("cannot factor the zero polynomial")

        lc = f.leading_coefficient
        if lc != self.field.one():
            yield self.constant(lc, (ind,))
            f = self.monic(f)

        k = f.terms[0].degree
        if k > 0:
            yield self.pow(self.x(ind), k)
            f = Polynomial(self, (ind,), [Monomial(t.ring, t.coefficient, t.degree - k) for t in f.terms])

        stack = [f]
        while stack:
            f = stack.pop()
            if f.degree < 1:
                continue
            if f.degree == 1:
                yield f
                continue

            df = f.derivative(ind)
            if df.is_zero():
                stack.extend([self._pth_root(f)] * self.field.characteristic)
                continue

            g = self.monic(self.gcd(f, df))
            if g.degree > 0:
                stack.append(g)
                stack.append(self.divide(f, g))
                continue

            gs = self.distinct_degree_factorization(f)
            if gs[-1].degree > 0:
                yield f
                continue
            for d, gd in enumerate(gs, start=1):
                if gd.degree > 0:
                    yield from self.equal_degree_factorization(gd, d, rng)

    def all_polynomials(
        self, max_degree: int, indeterminate: Indeterminate | None = None, monic: bool = False
    ) -> Iterator[Polynomial]:
        """Enumerates every polynomial of degree at most max_degree over the finite coefficient field.

        With monic=True only monic polynomials of degree 0 to max_degree are produced; otherwise all coefficient
        vectors of length max_degree + 1 are, the zero polynomial included.
        """
        field = self._finite_field()
        ind = indeterminate or DEFAULT_INDETERMINATES[0]
        elements = list(field)
        if not monic:
            for coeffs in itertools.product(elements, repeat=max_degree + 1):
                yield self._from_dense(list(coeffs), ind)
            return
        for degree in range(max_degree + 1):
            for coeffs in itertools.product(elements, repeat=degree):
                yield self._from_dense(list(coeffs) + [field.one()], ind)

    def __str__(self) -> str:
        return f"{self.coefficient_ring}[x]"
