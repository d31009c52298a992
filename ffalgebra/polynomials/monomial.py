# (C) 2024 Irreducible Inc.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from ..errors import MalformedPolynomialError
from ..rings.ring import Ring

R = TypeVar("R")


@dataclass(frozen=True)
class Monomial(Generic[R]):
    """A coefficient times a product of indeterminates, one exponent per indeterminate."""

    ring: Ring[R]
    coefficient: R
    exponents: tuple[int, ...]

    def __init__(self, ring: Ring[R], coefficient: R, exponents: Any):
        if isinstance(exponents, int):
            exponents = (exponents,)
        exponents = tuple(exponents)
        if any(e < 0 for e in exponents):
            raise MalformedPolynomialError(f"negative exponent in {exponents}")
        object.__setattr__(self, "ring", ring)
        object.__setattr__(self, "coefficient", coefficient)
        object.__setattr__(self, "exponents", exponents)

    @property
    def degree(self) -> int:
        return sum(self.exponents)

    def __neg__(self) -> Self:
        return type(self)(self.ring, self.ring.negate(self.coefficient), self.exponents)

    def signature(self, degree: int) -> int:
        """Orders monomials by total degree, then by the exponents read as digits in base degree + 1.

        degree must bound every exponent for the ordering to be injective.
        """
        sig = self.degree
        for e in reversed(self.exponents):
            sig = sig * (degree + 1) + e
        return sig

    def __str__(self) -> str:
        return f"{self.coefficient}·" + "·".join(str(e) for e in self.exponents)
