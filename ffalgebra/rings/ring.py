# (C) 2024 Irreducible Inc.

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Group(Generic[R]):
    """A group given by its identity, its binary operation and its inversion."""

    identity: R
    op: Callable[[R, R], R]
    invert: Callable[[R], R]


class Ring(ABC, Generic[R]):
    """A commutative ring with unity.

    A Ring instance encapsulates the arithmetic of its elements. Generic algorithms, most notably polynomial
    arithmetic, are written against this interface so that they work the same over the integers, over any finite
    field and over polynomial rings themselves.
    """

    @abstractmethod
    def zero(self) -> R:
        pass

    @abstractmethod
    def one(self) -> R:
        pass

    @abstractmethod
    def add(self, left: R, right: R) -> R:
        pass

    @abstractmethod
    def negate(self, operand: R) -> R:
        pass

    def subtract(self, left: R, right: R) -> R:
        return self.add(left, self.negate(right))

    @abstractmethod
    def multiply(self, left: R, right: R) -> R:
        pass

    def square(self, operand: R) -> R:
        return self.multiply(operand, operand)

    def pow(self, base: R, exponent: int) -> R:
        if exponent < 0:
            raise ValueError("negative exponent in a ring")
        acc = self.one()
        val = base

        while exponent:
            if exponent % 2:
                acc = self.multiply(acc, val)
            exponent >>= 1
            if exponent:
                val = self.square(val)

        return acc

    @abstractmethod
    def from_int(self, val: int) -> R:
        """Returns the image of the integer val under the canonical map Z -> R, ie. val * 1."""
        pass

    def scale(self, elem: R, n: int) -> R:
        return self.multiply(elem, self.from_int(n))

    def is_zero(self, elem: R) -> bool:
        return elem == self.zero()

    def is_one(self, elem: R) -> bool:
        return elem == self.one()

    @property
    def elements_have_sign(self) -> bool:
        """Whether elements print with a leading minus sign when negative."""
        return False

    def sign(self, elem: R) -> int:
        return 0 if self.is_zero(elem) else 1

    def random_small_nonzero(self, rng: random.Random) -> R:
        """Returns a random nonzero element biased towards elements that print compactly."""
        return self.one()

    @property
    def additive_group(self) -> Group[R]:
        return Group(self.zero(), self.add, self.negate)


class Field(Ring[R]):
    """A ring in which every nonzero element has a multiplicative inverse."""

    @abstractmethod
    def inverse(self, operand: R) -> R:
        """Returns the multiplicative inverse, raising ZeroDivisionError for zero."""
        pass

    def divide(self, left: R, right: R) -> R:
        return self.multiply(left, self.inverse(right))

    @property
    def multiplicative_group(self) -> Group[R]:
        return Group(self.one(), self.multiply, self.inverse)
