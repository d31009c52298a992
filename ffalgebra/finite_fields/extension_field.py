# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import Sequence

from . import dense
from .finite_field import FiniteField, FiniteFieldElem
from .irreducible import find_irreducible, is_irreducible
from .prime_field import PrimeField


class ExtensionField(FiniteField):
    """A finite field GF(p^n) represented as polynomials over GF(p) modulo an irreducible polynomial.

    The code of an element is the integer whose base-p digits, least significant first, are the coefficients of its
    polynomial representative, ie. code = sum(c_i * p^i). Products are reduced with a table holding x^k mod modulus
    for every k in [n, 2n - 2], computed once at construction.
    """

    def __init__(self, base_field: PrimeField, modulus: Sequence[int | FiniteFieldElem]):
        p = base_field.characteristic
        coeffs = [int(c) % p for c in modulus]
        n = len(coeffs) - 1
        if n < 2:
            raise ValueError("extension modulus must have degree at least 2")
        if coeffs[-1] != 1:
            raise ValueError("extension modulus must be monic")
        super().__init__(p, n)
        if not is_irreducible(coeffs, p):
            raise ValueError(f"modulus {coeffs} is reducible over {base_field}")

        self.base_field = base_field
        self._modulus = tuple(coeffs)

        # x^n = -(c_0 + c_1 x + ... + c_{n-1} x^{n-1})
        ideal = [-c % p for c in coeffs[:n]]
        power = list(ideal)
        self._power_table = [power]
        for _ in range(n, 2 * n - 2):
            lc = power[-1]
            power = [0] + power[:-1]
            if lc:
                power = [(power[i] + lc * ideal[i]) % p for i in range(n)]
            self._power_table.append(power)

    @classmethod
    def of_degree(cls, base_field: PrimeField, degree: int) -> ExtensionField:
        """Constructs GF(p^degree) over the given prime field with the first irreducible modulus found."""
        return cls(base_field, find_irreducible(base_field.characteristic, degree))

    @property
    def modulus(self) -> tuple[FiniteFieldElem, ...]:
        return tuple(self.base_field.element(c) for c in self._modulus)

    def digits(self, code: int) -> list[int]:
        """Returns the n base-p digits of code, least significant first."""
        p = self._characteristic
        out = []
        for _ in range(self._dimension):
            code, digit = divmod(code, p)
            out.append(digit)
        return out

    def _encode(self, digits: Sequence[int]) -> int:
        return dense.to_code(list(digits), self._characteristic)

    def coefficients(self, elem: FiniteFieldElem) -> list[FiniteFieldElem]:
        """Returns the base field coefficients of elem's polynomial representative, least significant first."""
        return [self.base_field.element(d) for d in self.digits(self._code(elem))]

    def from_coefficients(self, coeffs: Sequence[int | FiniteFieldElem]) -> FiniteFieldElem:
        if len(coeffs) > self._dimension:
            raise ValueError(f"at most {self._dimension} coefficients expected")
        return self._wrap(self._encode([int(c) % self._characteristic for c in coeffs]))

    def generator(self) -> FiniteFieldElem:
        """Returns the class of x, a root of the modulus."""
        return self._wrap(self._characteristic)

    def _add(self, left: int, right: int) -> int:
        p = self._characteristic
        return self._encode([(a + b) % p for a, b in zip(self.digits(left), self.digits(right))])

    def _negate(self, operand: int) -> int:
        p = self._characteristic
        return self._encode([-a % p for a in self.digits(operand)])

    def _subtract(self, left: int, right: int) -> int:
        p = self._characteristic
        return self._encode([(a - b) % p for a, b in zip(self.digits(left), self.digits(right))])

    def _multiply(self, left: int, right: int) -> int:
        p = self._characteristic
        n = self._dimension
        a = self.digits(left)
        b = self.digits(right)

        product = [0] * (2 * n - 1)
        for i, ai in enumerate(a):
            if ai:
                for j, bj in enumerate(b):
                    product[i + j] += ai * bj

        result = product[:n]
        for k in range(n, 2 * n - 1):
            c = product[k] % p
            if c:
                reduction = self._power_table[k - n]
                for i in range(n):
                    result[i] += c * reduction[i]

        return self._encode([r % p for r in result])

    def _inverse(self, operand: int) -> int:
        p = self._characteristic
        a = dense.from_code(operand, p, self._dimension)
        return dense.to_code(dense.inverse_mod(a, list(self._modulus), p), p)

    def format_str(self, elem: FiniteFieldElem) -> str:
        terms = []
        for i, c in enumerate(self.digits(self._code(elem))):
            if c == 0:
                continue
            if i == 0:
                terms.append(str(c))
            else:
                power = "α" if i == 1 else f"α^{i}"
                terms.append(power if c == 1 else f"{c}{power}")
        return " + ".join(terms) if terms else "0"
