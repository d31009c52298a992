# (C) 2024 Irreducible Inc.

import math
import random

from .ring import Ring

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class IntegerRing(Ring[int]):
    """The ring of arbitrary-precision integers."""

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, left: int, right: int) -> int:
        return left + right

    def negate(self, operand: int) -> int:
        return -operand

    def subtract(self, left: int, right: int) -> int:
        return left - right

    def multiply(self, left: int, right: int) -> int:
        return left * right

    def from_int(self, val: int) -> int:
        return val

    @property
    def elements_have_sign(self) -> bool:
        return True

    def sign(self, elem: int) -> int:
        return (elem > 0) - (elem < 0)

    def random_small_nonzero(self, rng: random.Random) -> int:
        magnitude = int(1 - 2 * math.log(1 - rng.random()))
        return magnitude if rng.random() < 0.5 else -magnitude

    def __eq__(self, other) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __str__(self) -> str:
        return "ZZ"


class Int32Ring(IntegerRing):
    """Signed 32-bit integers with overflow checking."""

    @staticmethod
    def _checked(val: int) -> int:
        if not INT32_MIN <= val <= INT32_MAX:
            raise OverflowError(f"{val} does not fit in a 32-bit signed integer")
        return val

    def add(self, left: int, right: int) -> int:
        return self._checked(left + right)

    def negate(self, operand: int) -> int:
        return self._checked(-operand)

    def subtract(self, left: int, right: int) -> int:
        return self._checked(left - right)

    def multiply(self, left: int, right: int) -> int:
        return self._checked(left * right)

    def from_int(self, val: int) -> int:
        return self._checked(val)

    def __str__(self) -> str:
        return "INT32"


ZZ = IntegerRing()
INT32 = Int32Ring()
