# (C) 2024 Irreducible Inc.

from __future__ import annotations

import itertools
import string
import threading

_ids = itertools.count(1)
_ids_lock = threading.Lock()


class Indeterminate:
    """A formal variable of a polynomial.

    Every instance receives a fresh id, so two indeterminates with the same symbol are still distinct. Polynomials
    over different indeterminates are aligned on the union of their indeterminates, ordered by id.
    """

    __slots__ = ("id", "symbol")

    def __init__(self, symbol: str):
        if not isinstance(symbol, str):
            raise TypeError("indeterminate symbol must be a string")
        if not symbol:
            raise ValueError("indeterminate symbol must not be empty")
        if any(c.isspace() for c in symbol):
            raise ValueError(f"indeterminate symbol {symbol!r} contains whitespace")
        with _ids_lock:
            self.id = next(_ids)
        self.symbol = symbol

    def __eq__(self, other) -> bool:
        if not isinstance(other, Indeterminate):
            return NotImplemented
        return self.id == other.id and self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash((self.id, "Indeterminate"))

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Indeterminate({self.symbol!r}, id={self.id})"


DEFAULT_INDETERMINATES: tuple[Indeterminate, ...] = tuple(
    Indeterminate(c) for c in "xyz" + string.ascii_lowercase[:23][::-1]
)

_by_symbol = {ind.symbol: ind for ind in DEFAULT_INDETERMINATES}
_named: dict[str, Indeterminate] = {}
_named_lock = threading.Lock()


def named(symbol: str) -> Indeterminate:
    """Returns the shared indeterminate for a symbol, creating it on first use."""
    ind = _by_symbol.get(symbol)
    if ind is not None:
        return ind
    with _named_lock:
        ind = _named.get(symbol)
        if ind is None:
            ind = _named[symbol] = Indeterminate(symbol)
        return ind
