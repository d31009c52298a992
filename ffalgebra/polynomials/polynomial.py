# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Sequence

from ..errors import FieldMismatchError, MalformedPolynomialError
from .indeterminate import Indeterminate
from .monomial import Monomial

if TYPE_CHECKING:
    from .polynomial_ring import PolynomialRing


class Polynomial:
    """An immutable polynomial over an arbitrary coefficient ring.

    A polynomial is a list of monomials over an ordered list of indeterminates. Terms with a zero coefficient are
    dropped and the remaining ones are kept sorted by Monomial.signature, which makes the term list canonical: two
    polynomials over the same indeterminates are equal exactly when their term lists are. Polynomials should be built
    through a PolynomialRing, whose operations always produce well-formed term lists; handing this constructor
    terms of the wrong width or with repeated exponents raises MalformedPolynomialError.
    """

    __slots__ = ("ring", "indeterminates", "terms", "degree")

    ring: PolynomialRing
    indeterminates: tuple[Indeterminate, ...]
    terms: tuple[Monomial, ...]
    degree: int

    def __init__(self, ring: PolynomialRing, indeterminates: Iterable[Indeterminate], terms: Iterable[Monomial]):
        coefficient_ring = ring.coefficient_ring
        indeterminates = tuple(indeterminates)
        kept = [t for t in terms if not coefficient_ring.is_zero(t.coefficient)]

        for t in kept:
            if len(t.exponents) != len(indeterminates):
                raise MalformedPolynomialError(
                    f"term {t} has {len(t.exponents)} exponents for {len(indeterminates)} indeterminates"
                )

        degree = max((t.degree for t in kept), default=-1)
        kept.sort(key=lambda t: t.signature(degree))
        for prev, cur in zip(kept, kept[1:]):
            if prev.exponents == cur.exponents:
                raise MalformedPolynomialError(f"duplicate exponents {cur.exponents}")

        object.__setattr__(self, "ring", ring)
        object.__setattr__(self, "indeterminates", indeterminates)
        object.__setattr__(self, "terms", tuple(kept))
        object.__setattr__(self, "degree", degree)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Polynomial is immutable")

    @property
    def coefficient_ring(self):
        return self.ring.coefficient_ring

    def is_zero(self) -> bool:
        return not self.terms

    def is_constant(self) -> bool:
        return self.degree <= 0

    @property
    def leading_term(self) -> Monomial:
        if not self.terms:
            raise ValueError("the zero polynomial has no leading term")
        return self.terms[-1]

    @property
    def leading_coefficient(self):
        if not self.terms:
            return self.coefficient_ring.zero()
        return self.terms[-1].coefficient

    def coefficients(self) -> list:
        """Returns the dense coefficient list of a univariate polynomial, least significant first."""
        trimmed = self.trim_indeterminates()
        if len(trimmed.indeterminates) > 1:
            raise ValueError("coefficients() requires a univariate polynomial")
        zero = self.coefficient_ring.zero()
        out = [zero] * (self.degree + 1)
        for t in trimmed.terms:
            out[t.degree] = t.coefficient
        return out

    # Indeterminate bookkeeping.

    def trim_indeterminates(self) -> Polynomial:
        """Drops the indeterminates that appear in no term."""
        used = [i for i in range(len(self.indeterminates)) if any(t.exponents[i] for t in self.terms)]
        if len(used) == len(self.indeterminates):
            return self
        ring = self.coefficient_ring
        return Polynomial(
            self.ring,
            [self.indeterminates[i] for i in used],
            [Monomial(ring, t.coefficient, [t.exponents[i] for i in used]) for t in self.terms],
        )

    def with_indeterminates(self, indeterminates: Iterable[Indeterminate]) -> Polynomial:
        """Renames the indeterminates, keeping every term."""
        return Polynomial(self.ring, indeterminates, self.terms)

    def align_indeterminates(self, indeterminates: Sequence[Indeterminate]) -> Polynomial:
        """Re-expresses the polynomial over a superset of its indeterminates, in the given order."""
        indeterminates = tuple(indeterminates)
        if indeterminates == self.indeterminates:
            return self
        try:
            positions = [indeterminates.index(ind) for ind in self.indeterminates]
        except ValueError:
            raise ValueError(f"cannot align {self.indeterminates} to {indeterminates}") from None

        terms = []
        for t in self.terms:
            exponents = [0] * len(indeterminates)
            for pos, e in zip(positions, t.exponents):
                exponents[pos] = e
            terms.append(Monomial(t.ring, t.coefficient, exponents))
        return Polynomial(self.ring, indeterminates, terms)

    def _index_of(self, indeterminate: Indeterminate | str | None) -> int:
        if indeterminate is None:
            return 0 if self.indeterminates else -1
        if isinstance(indeterminate, Indeterminate) and indeterminate in self.indeterminates:
            return self.indeterminates.index(indeterminate)
        symbol = str(indeterminate)
        for i, ind in enumerate(self.indeterminates):
            if ind.symbol == symbol:
                return i
        return -1

    # Calculus and evaluation.

    def derivative(self, indeterminate: Indeterminate | str | None = None) -> Polynomial:
        """Returns the formal partial derivative, by default with respect to the first indeterminate."""
        i = self._index_of(indeterminate)
        if i == -1:
            return self.ring.zero()
        ring = self.coefficient_ring
        terms = [
            Monomial(
                ring,
                ring.scale(t.coefficient, t.exponents[i]),
                [e - 1 if j == i else e for j, e in enumerate(t.exponents)],
            )
            for t in self.terms
            if t.exponents[i] > 0
        ]
        return Polynomial(self.ring, self.indeterminates, terms)

    def evaluate(self, values: Any):
        """Evaluates the polynomial at a point.

        :param values: a single value for univariate polynomials, a sequence with one value per indeterminate, or a
            mapping from indeterminates or their symbols to values.
        """
        ring = self.coefficient_ring
        n = len(self.indeterminates)
        if isinstance(values, Mapping):
            point = []
            for ind in self.indeterminates:
                if ind in values:
                    point.append(values[ind])
                elif ind.symbol in values:
                    point.append(values[ind.symbol])
                else:
                    raise ValueError(f"no value given for {ind}")
        elif isinstance(values, (list, tuple)):
            point = list(values)
        else:
            point = [values] if n else []
        if len(point) != n:
            raise ValueError(f"expected {n} values, got {len(point)}")

        point = [ring.from_int(v) if isinstance(v, int) else v for v in point]
        acc = ring.zero()
        for t in self.terms:
            value = t.coefficient
            for v, e in zip(point, t.exponents):
                if e:
                    value = ring.multiply(value, ring.pow(v, e))
            acc = ring.add(acc, value)
        return acc

    def __call__(self, *values):
        return self.evaluate(values[0] if len(values) == 1 else list(values))

    # Operators.

    def _coerce(self, other) -> Polynomial:
        if isinstance(other, Polynomial) and other.ring == self.ring:
            return other
        if isinstance(other, Polynomial) and other.ring != self.coefficient_ring:
            raise FieldMismatchError(f"cannot combine polynomials over {self.ring} and {other.ring}")
        if isinstance(other, int):
            other = self.coefficient_ring.from_int(other)
        return self.ring.constant(other, self.indeterminates)

    def __pos__(self) -> Polynomial:
        return self

    def __neg__(self) -> Polynomial:
        return self.ring.negate(self)

    def __add__(self, other) -> Polynomial:
        return self.ring.add(self, self._coerce(other))

    def __radd__(self, other) -> Polynomial:
        return self.ring.add(self._coerce(other), self)

    def __sub__(self, other) -> Polynomial:
        return self.ring.subtract(self, self._coerce(other))

    def __rsub__(self, other) -> Polynomial:
        return self.ring.subtract(self._coerce(other), self)

    def __mul__(self, other) -> Polynomial:
        if isinstance(other, Monomial):
            return self.ring.multiply_monomial(self, other)
        return self.ring.multiply(self, self._coerce(other))

    def __rmul__(self, other) -> Polynomial:
        return self.ring.multiply(self._coerce(other), self)

    def __pow__(self, exponent: int) -> Polynomial:
        return self.ring.pow(self, exponent)

    def __truediv__(self, other) -> Polynomial:
        divide_scalar = getattr(self.ring, "divide_scalar", None)
        if divide_scalar is None or isinstance(other, Polynomial) and other.ring == self.ring:
            return NotImplemented
        if isinstance(other, int):
            other = self.coefficient_ring.from_int(other)
        return divide_scalar(self, other)

    def __divmod__(self, other) -> tuple[Polynomial, Polynomial]:
        if not hasattr(self.ring, "divmod"):
            return NotImplemented
        return self.ring.divmod(self, self._coerce(other))

    def __floordiv__(self, other) -> Polynomial:
        if not hasattr(self.ring, "divmod"):
            return NotImplemented
        return self.ring.divide(self, self._coerce(other))

    def __mod__(self, other) -> Polynomial:
        if not hasattr(self.ring, "divmod"):
            return NotImplemented
        return self.ring.mod(self, self._coerce(other))

    # Comparison and formatting.

    def _canonical(self) -> tuple:
        trimmed = self.trim_indeterminates()
        order = sorted(range(len(trimmed.indeterminates)), key=lambda i: trimmed.indeterminates[i].symbol)
        terms = sorted(
            ((tuple(t.exponents[i] for i in order), t.coefficient) for t in trimmed.terms),
            key=lambda term: term[0],
        )
        return tuple(trimmed.indeterminates[i].symbol for i in order), tuple(terms)

    def __eq__(self, other) -> bool:
        if isinstance(other, Polynomial):
            return self.ring == other.ring and self._canonical() == other._canonical()
        if isinstance(other, int):
            other = self.coefficient_ring.from_int(other)
        if self.degree == -1:
            return self.coefficient_ring.zero() == other
        return self.degree == 0 and self.terms[0].coefficient == other

    def __hash__(self) -> int:
        return hash((self.ring, self._canonical()))

    def __str__(self) -> str:
        ring = self.coefficient_ring
        if not self.terms:
            return str(ring.zero())

        out = ""
        for t in reversed(self.terms):
            coeff = t.coefficient
            if ring.elements_have_sign and ring.sign(coeff) < 0:
                coeff = ring.negate(coeff)
                out += " - " if out else "-"
            elif out:
                out += " + "

            if t.degree == 0 or coeff != ring.one():
                cs = str(coeff)
                if not cs.isalnum():
                    cs = f"({cs})"
                out += cs

            for ind, e in zip(self.indeterminates, t.exponents):
                if e == 1:
                    out += ind.symbol
                elif e > 1:
                    out += f"{ind.symbol}^{e}"
        return out

    def __repr__(self) -> str:
        return f"Polynomial({self})"
