# (C) 2024 Irreducible Inc.

"""Conversions between this package's fields and polynomials and those of the galois library.

The galois integer representation of an element of GF(p^n) is the integer whose base-p digits are its polynomial
coefficients, the same encoding used by ExtensionField and BinaryField, so codes carry over unchanged as long as both
sides agree on the modulus.
"""

from typing import Iterable, Type, cast

from galois import GF, FieldArray, Poly

from .extension_field import ExtensionField
from .finite_field import FiniteField, FiniteFieldElem


def to_galois_field(field: FiniteField) -> Type[FieldArray]:
    p = field.characteristic
    if field.degree == 1:
        return GF(p)
    if not isinstance(field, ExtensionField):
        raise TypeError(f"cannot convert {field} to a galois field")
    modulus = Poly([int(c) for c in reversed(field.modulus)], field=GF(p))
    return GF(p**field.degree, irreducible_poly=modulus)


def to_galois_array(field: FiniteField, elems: Iterable[FiniteFieldElem]) -> FieldArray:
    return to_galois_field(field)([elem.value for elem in elems])


def from_galois_array(field: FiniteField, array: FieldArray) -> list[FiniteFieldElem]:
    return [field.element(int(v)) for v in cast(list, array.tolist())]


def to_galois_poly(coefficients: Iterable[FiniteFieldElem], field: FiniteField) -> Poly:
    """Converts coefficients, least significant first, into a galois polynomial."""
    values = [elem.value for elem in coefficients]
    return Poly(list(reversed(values)) or [0], field=to_galois_field(field))


def from_galois_poly(poly: Poly, field: FiniteField) -> list[FiniteFieldElem]:
    """Returns the coefficients of a galois polynomial, least significant first."""
    return [field.element(int(c)) for c in reversed(cast(list, poly.coeffs.tolist()))]
