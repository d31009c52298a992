# (C) 2024 Irreducible Inc.

from __future__ import annotations

from ..config import INVERSE_TABLE_LIMIT
from ..errors import InvalidFieldOrderError
from ..utils.utils import is_prime
from .finite_field import FiniteField, FiniteFieldElem


def inverse_mod(n: int, p: int) -> int:
    """Returns the inverse of n modulo p with the extended Euclidean algorithm."""
    a, b, s, t = p, n % p, 0, 1
    while b:
        a, b, s, t = b, a % b, t, s - t * (a // b)
    if a != 1:
        raise ZeroDivisionError(f"{n} is not invertible modulo {p}")
    return s % p


class PrimeField(FiniteField):
    """The field of integers modulo a prime p.

    Element codes are the residues themselves. For small primes the inverses of all nonzero residues are computed
    once, at construction.
    """

    def __init__(self, prime: int):
        if not is_prime(prime):
            raise InvalidFieldOrderError(f"{prime} is not prime")
        super().__init__(prime, 1)
        self.p = prime
        self._inverses: list[int] | None = None
        if prime <= INVERSE_TABLE_LIMIT:
            self._inverses = [0] + [inverse_mod(n, prime) for n in range(1, prime)]

    @property
    def prime(self) -> int:
        return self.p

    def _add(self, left: int, right: int) -> int:
        return (left + right) % self.p

    def _subtract(self, left: int, right: int) -> int:
        return (left - right) % self.p

    def _negate(self, operand: int) -> int:
        return -operand % self.p

    def _multiply(self, left: int, right: int) -> int:
        return (left * right) % self.p

    def _pow(self, base: int, exponent: int) -> int:
        if exponent < 0:
            base = self._inverse(base)
            exponent = -exponent
        return pow(base, exponent, self.p)

    def _inverse(self, operand: int) -> int:
        if self._inverses is not None:
            return self._inverses[operand]
        return inverse_mod(operand, self.p)

    def max(self) -> FiniteFieldElem:
        return self._wrap(self.p - 1)

    def to_int(self, elem: FiniteFieldElem) -> int:
        """Converts from a field element to an integer in the range [0, p)"""
        return self._code(elem)

    def format_str(self, elem: FiniteFieldElem) -> str:
        return str(self._code(elem))
