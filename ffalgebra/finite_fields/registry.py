# (C) 2024 Irreducible Inc.

import logging
import threading

from ..config import MAX_FIELD_ORDER
from ..errors import InvalidFieldOrderError
from ..utils.utils import prime_power
from .binary_field import BinaryField
from .extension_field import ExtensionField
from .finite_field import FiniteField
from .prime_field import PrimeField

logger = logging.getLogger(__name__)


class FieldRegistry:
    """A cache of canonical finite fields, keyed by order.

    Construction happens outside the lock, so concurrent requests for a new order may each build a field, but only
    the first one stored is ever returned.
    """

    def __init__(self):
        self._fields: dict[int, FiniteField] = {}
        self._lock = threading.Lock()

    def of_order(self, order: int) -> FiniteField:
        with self._lock:
            field = self._fields.get(order)
        if field is not None:
            return field

        field = self._construct(order)
        with self._lock:
            return self._fields.setdefault(order, field)

    def of_prime_power(self, prime: int, power: int) -> FiniteField:
        if power < 1:
            raise InvalidFieldOrderError(f"field degree must be positive, got {power}")
        return self.of_order(prime**power)

    def __contains__(self, order: int) -> bool:
        with self._lock:
            return order in self._fields

    def __len__(self) -> int:
        with self._lock:
            return len(self._fields)

    def _construct(self, order: int) -> FiniteField:
        if not isinstance(order, int) or not 2 <= order <= MAX_FIELD_ORDER:
            raise InvalidFieldOrderError(f"invalid field order {order!r}")
        decomposed = prime_power(order)
        if decomposed is None:
            raise InvalidFieldOrderError(f"field order {order} is not a prime power")

        p, k = decomposed
        logger.debug("constructing field of order %d = %d^%d", order, p, k)
        if k == 1:
            return PrimeField(p)
        if p == 2:
            return BinaryField(k)
        return ExtensionField.of_degree(self.of_order(p), k)


default_registry = FieldRegistry()


def of_order(order: int) -> FiniteField:
    return default_registry.of_order(order)


def of_prime_power(prime: int, power: int) -> FiniteField:
    return default_registry.of_prime_power(prime, power)
