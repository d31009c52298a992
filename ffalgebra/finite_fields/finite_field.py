# (C) 2024 Irreducible Inc.

from __future__ import annotations

import math
import random
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Self

from ..config import MAX_FIELD_ORDER
from ..errors import ElementOutOfRangeError, FieldMismatchError, InvalidFieldOrderError
from ..rings.ring import Field

if TYPE_CHECKING:
    from .registry import FieldRegistry


@dataclass(frozen=True, eq=False)
class FiniteFieldElem:
    """A finite field element.

    Elements are immutable pairs of a field and an integer code in [0, order). They should be obtained from the field
    (field.element(code), field.zero(), ...) rather than instantiated directly. Arithmetic accepts plain integers on
    either side, which are mapped into the field by FiniteField.from_int.
    """

    field: FiniteField
    value: int

    def _coerce(self, other) -> FiniteFieldElem:
        if isinstance(other, FiniteFieldElem):
            if other.field.order != self.field.order:
                raise FieldMismatchError(f"cannot combine elements of {self.field} and {other.field}")
            return other
        if isinstance(other, int):
            return self.field.from_int(other)
        return NotImplemented

    def __add__(self, other) -> Self:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.field.add(self, other)

    def __radd__(self, other) -> Self:
        return self.__add__(other)

    def __mul__(self, other) -> Self:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.field.multiply(self, other)

    def __rmul__(self, other) -> Self:
        return self.__mul__(other)

    def __sub__(self, other) -> Self:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.field.subtract(self, other)

    def __rsub__(self, other) -> Self:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.field.subtract(other, self)

    def __truediv__(self, other) -> Self:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.field.divide(self, other)

    def __rtruediv__(self, other) -> Self:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.field.divide(other, self)

    def __neg__(self) -> Self:
        return self.field.negate(self)

    def inverse(self) -> Self:
        return self.field.inverse(self)

    def square(self) -> Self:
        return self.field.square(self)

    def __pow__(self, exponent: int) -> Self:
        return self.field.pow(self, exponent)

    def __eq__(self, other) -> bool:
        if isinstance(other, int):
            other = self.field.from_int(other)
        if not isinstance(other, FiniteFieldElem):
            return NotImplemented
        return self.field.order == other.field.order and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.field.order, self.value))

    def __str__(self) -> str:
        return self.field.format_str(self)

    def __repr__(self) -> str:
        return f"{self.field}({self.value})"

    def __bytes__(self) -> bytes:
        return self.field.to_bytes(self)

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        return self.value == 0

    def __bool__(self) -> bool:
        return not self.is_zero()


class FiniteField(Field[FiniteFieldElem]):
    """A finite field implementation.

    All finite fields have order p^n, where p is a prime number. p is the field characteristic and n is the degree
    of the field extension of GF(p^n) over the base field GF(p). Elements are encoded as integers in [0, p^n); each
    concrete family decides what a code means and implements the basic operations on codes (_add, _negate,
    _multiply and _inverse). This base class validates operands, wraps codes into FiniteFieldElem values and derives
    the remaining operations.

    Fields compare equal when they have the same order, so that a field can be used as a cache key and elements of
    a cached field are interchangeable with elements of a freshly constructed one.
    """

    def __init__(self, characteristic: int, dimension: int):
        order = characteristic**dimension
        if order > MAX_FIELD_ORDER:
            raise InvalidFieldOrderError(f"field order {characteristic}^{dimension} exceeds {MAX_FIELD_ORDER}")
        self._characteristic = characteristic
        self._dimension = dimension
        self._order = order
        self._zero = FiniteFieldElem(self, 0)
        self._one = FiniteFieldElem(self, 1)

    @classmethod
    def of_order(cls, order: int, registry: FieldRegistry | None = None) -> FiniteField:
        """Returns the canonical field with the given prime power order."""
        from .registry import default_registry

        return (registry or default_registry).of_order(order)

    @property
    def characteristic(self) -> int:
        """The field characteristic, ie. the order of the base field."""
        return self._characteristic

    @property
    def dimension(self) -> int:
        """The dimension of the field as a vector space over its base field."""
        return self._dimension

    @property
    def degree(self) -> int:
        """The degree of the field as an extension over its base field.

        Alias of dimension property.
        """
        return self._dimension

    @property
    def order(self) -> int:
        return self._order

    def __len__(self) -> int:
        return self._order

    def __iter__(self) -> Iterator[FiniteFieldElem]:
        for code in range(self._order):
            yield FiniteFieldElem(self, code)

    def __getitem__(self, code: int) -> FiniteFieldElem:
        return self.element(code)

    def element(self, code: int) -> FiniteFieldElem:
        if not 0 <= code < self._order:
            raise ElementOutOfRangeError(f"element code {code} out of range for {self}")
        return FiniteFieldElem(self, code)

    def _code(self, elem: FiniteFieldElem) -> int:
        if elem.field.order != self._order:
            raise FieldMismatchError(f"element of {elem.field} used in {self}")
        return elem.value

    def _wrap(self, code: int) -> FiniteFieldElem:
        return FiniteFieldElem(self, code)

    # Arithmetic on codes, implemented per family.

    @abstractmethod
    def _add(self, left: int, right: int) -> int:
        pass

    @abstractmethod
    def _negate(self, operand: int) -> int:
        pass

    def _subtract(self, left: int, right: int) -> int:
        return self._add(left, self._negate(right))

    @abstractmethod
    def _multiply(self, left: int, right: int) -> int:
        pass

    @abstractmethod
    def _inverse(self, operand: int) -> int:
        pass

    def _pow(self, base: int, exponent: int) -> int:
        if exponent < 0:
            base = self._inverse(base)
            exponent = -exponent
        acc = 1
        val = base

        while exponent:
            if exponent % 2:
                acc = self._multiply(acc, val)
            exponent >>= 1
            if exponent:
                val = self._multiply(val, val)

        return acc

    # Arithmetic on elements.

    def zero(self) -> FiniteFieldElem:
        return self._zero

    def one(self) -> FiniteFieldElem:
        return self._one

    def add(self, left: FiniteFieldElem, right: FiniteFieldElem) -> FiniteFieldElem:
        return self._wrap(self._add(self._code(left), self._code(right)))

    def subtract(self, left: FiniteFieldElem, right: FiniteFieldElem) -> FiniteFieldElem:
        return self._wrap(self._subtract(self._code(left), self._code(right)))

    def negate(self, operand: FiniteFieldElem) -> FiniteFieldElem:
        return self._wrap(self._negate(self._code(operand)))

    def multiply(self, left: FiniteFieldElem, right: FiniteFieldElem) -> FiniteFieldElem:
        return self._wrap(self._multiply(self._code(left), self._code(right)))

    def square(self, operand: FiniteFieldElem) -> FiniteFieldElem:
        code = self._code(operand)
        return self._wrap(self._multiply(code, code))

    def pow(self, base: FiniteFieldElem, exponent: int) -> FiniteFieldElem:
        """Raises base to an integer power. Negative exponents invert base first."""
        code = self._code(base)
        if code == 0 and exponent < 0:
            raise ZeroDivisionError("inverting zero")
        return self._wrap(self._pow(code, exponent))

    def inverse(self, operand: FiniteFieldElem) -> FiniteFieldElem:
        code = self._code(operand)
        if code == 0:
            raise ZeroDivisionError("inverting zero")
        return self._wrap(self._inverse(code))

    def divide(self, left: FiniteFieldElem, right: FiniteFieldElem) -> FiniteFieldElem:
        return self.multiply(left, self.inverse(right))

    def from_int(self, val: int) -> FiniteFieldElem:
        """Creates a field element from an integer.

        The integer argument is mapped to (val mod p) * 1, where p is the field's prime characteristic. Use element()
        to address an element by its code.
        """
        return self._wrap(val % self._characteristic)

    def is_zero(self, elem: FiniteFieldElem) -> bool:
        return self._code(elem) == 0

    def random(self, rng: random.Random | None = None) -> FiniteFieldElem:
        return self._wrap((rng or random).randrange(self._order))

    def random_small_nonzero(self, rng: random.Random) -> FiniteFieldElem:
        while True:
            x = 1 - math.log(1 - rng.random()) * self._order
            if x < self._order:
                return self._wrap(int(x))

    # Serialization and formatting.

    @property
    def bytes_len(self) -> int:
        return ((self._order - 1).bit_length() + 7) // 8

    def to_bytes(self, elem: FiniteFieldElem) -> bytes:
        return self._code(elem).to_bytes(self.bytes_len, byteorder="little")

    def from_bytes(self, serialized: bytes) -> FiniteFieldElem:
        if len(serialized) != self.bytes_len:
            raise ValueError(f"serialized element must be {self.bytes_len} bytes")
        return self.element(int.from_bytes(serialized, byteorder="little"))

    @abstractmethod
    def format_str(self, elem: FiniteFieldElem) -> str:
        pass

    def is_isomorphic(self, field: FiniteField) -> bool:
        """Returns whether the characteristic and dimension of the fields are the same."""
        return field.characteristic == self.characteristic and field.dimension == self.dimension

    def __eq__(self, other) -> bool:
        if not isinstance(other, FiniteField):
            return NotImplemented
        return self._order == other._order

    def __hash__(self) -> int:
        return hash(("FiniteField", self._order))

    def __str__(self) -> str:
        if self._dimension == 1:
            return f"GF({self._characteristic})"
        return f"GF({self._characteristic}^{self._dimension})"

    def __repr__(self) -> str:
        return str(self)
