# (C) 2024 Irreducible Inc.

import numpy as np
import numpy.typing as npt

from .finite_field import FiniteField


def _table(field: FiniteField, op) -> npt.NDArray[np.int64]:
    table = np.zeros((field.order, field.order), dtype=np.int64)
    for a in field:
        for b in field:
            table[a.value, b.value] = op(a, b).value
    return table


def addition_table(field: FiniteField) -> npt.NDArray[np.int64]:
    """Returns the table of a + b indexed by the codes of a and b."""
    return _table(field, field.add)


def multiplication_table(field: FiniteField) -> npt.NDArray[np.int64]:
    """Returns the table of a * b indexed by the codes of a and b."""
    return _table(field, field.multiply)


def negation_table(field: FiniteField) -> npt.NDArray[np.int64]:
    return np.array([field.negate(a).value for a in field], dtype=np.int64)


def inverse_table(field: FiniteField) -> npt.NDArray[np.int64]:
    """Returns the codes of the inverses of the elements, with 0 standing in for the inverse of zero."""
    return np.array([0] + [field.inverse(a).value for a in list(field)[1:]], dtype=np.int64)
