# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import Sequence

from ..config import BINARY_WORD_BITS
from ..utils.utils import bits_mask, is_bit_set
from .extension_field import ExtensionField
from .finite_field import FiniteFieldElem
from .irreducible import find_irreducible
from .prime_field import PrimeField


def clmul(a: int, b: int) -> int:
    """Carry-less product of two bit-packed polynomials over GF(2)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def cldivmod(a: int, b: int) -> tuple[int, int]:
    """Carry-less division with remainder of bit-packed polynomials over GF(2)."""
    if b == 0:
        raise ZeroDivisionError("polynomial division by zero")
    db = b.bit_length()
    q = 0
    while a.bit_length() >= db:
        shift = a.bit_length() - db
        q ^= 1 << shift
        a ^= b << shift
    return q, a


class BinaryField(ExtensionField):
    """GF(2^n) with elements packed into integers, bit i holding the coefficient of x^i.

    The codes coincide with those of ExtensionField over GF(2) with the same modulus, but arithmetic works on the
    integers directly: addition is XOR and multiplication is a carry-less product whose high bits are folded back
    with a per-bit table of x^i mod modulus.
    """

    def __init__(self, degree: int, modulus: Sequence[int | FiniteFieldElem] | None = None):
        if modulus is None:
            modulus = find_irreducible(2, degree)
        super().__init__(PrimeField(2), modulus)
        if self.degree != degree:
            raise ValueError(f"modulus has degree {self.degree}, expected {degree}")

        self.mod = sum(1 << i for i, c in enumerate(self._modulus) if c)
        self.mask = bits_mask(degree)
        self.hexlen = (degree + 3) // 4

        width = max(BINARY_WORD_BITS, 2 * degree - 1)
        self._bit_reductions = []
        power = self.mod ^ (1 << degree)
        for _ in range(degree, width):
            self._bit_reductions.append(power)
            power <<= 1
            if is_bit_set(power, degree):
                power ^= self.mod

    def _add(self, left: int, right: int) -> int:
        return left ^ right

    def _subtract(self, left: int, right: int) -> int:
        return left ^ right

    def _negate(self, operand: int) -> int:
        return operand

    def _multiply(self, left: int, right: int) -> int:
        product = clmul(left, right)
        high = product >> self.degree
        result = product & self.mask
        i = 0
        while high:
            if high & 1:
                result ^= self._bit_reductions[i]
            high >>= 1
            i += 1
        return result

    def _inverse(self, operand: int) -> int:
        r0, r1 = self.mod, operand
        t0, t1 = 0, 1
        while r1 > 1:
            q, r = cldivmod(r0, r1)
            r0, r1 = r1, r
            t0, t1 = t1, t0 ^ clmul(q, t1)
        if r1 == 0:
            raise ZeroDivisionError("inverting zero")
        return t1

    def format_str(self, elem: FiniteFieldElem) -> str:
        return f"{self._code(elem):#0{self.hexlen + 2}x}"
