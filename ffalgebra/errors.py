# (C) 2024 Irreducible Inc.


class AlgebraError(Exception):
    """Base class for errors raised by the algebra core."""


class FieldMismatchError(AlgebraError, ValueError):
    """Raised when combining elements of fields with different orders."""


class ElementOutOfRangeError(AlgebraError, ValueError):
    """Raised when an element code falls outside [0, order)."""


class InvalidFieldOrderError(AlgebraError, ValueError):
    """Raised when a field order is not a representable prime power."""


class MalformedPolynomialError(AlgebraError, ValueError):
    """Raised when a term list violates the polynomial invariants."""


class RetryExhaustedError(AlgebraError, RuntimeError):
    """Raised when a randomized algorithm fails to make progress within its attempt budget."""
