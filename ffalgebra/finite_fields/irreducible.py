# (C) 2024 Irreducible Inc.

import functools
import itertools
import logging
from typing import Iterator

from ..utils.utils import prime_factors
from . import dense
from .dense import Dense

logger = logging.getLogger(__name__)


def frobenius_power(h: Dense, p: int, k: int, f: Dense) -> Dense:
    """Returns h^(p^k) mod f."""
    for _ in range(k):
        h = dense.powmod(h, p, f, p)
    return h


def is_irreducible(f: Dense, p: int) -> bool:
    """Rabin's irreducibility test for a polynomial over GF(p).

    f of degree n is irreducible iff x^(p^n) = x (mod f) and gcd(f, x^(p^(n/r)) - x) = 1 for every prime r dividing n.
    """
    n = dense.degree(f)
    if n < 1:
        return False
    f = dense.monic(list(f), p)
    x = dense.mod([0, 1], f, p)

    for r in prime_factors(n):
        h = frobenius_power(x, p, n // r, f)
        if dense.degree(dense.gcd(f, dense.sub(h, x, p), p)) != 0:
            return False

    return frobenius_power(x, p, n, f) == x


def _monic(n: int, low: dict[int, int]) -> Dense:
    f = [0] * (n + 1)
    f[n] = 1
    for i, c in low.items():
        f[i] = c
    return f


def candidates(p: int, n: int) -> Iterator[Dense]:
    """Enumerates monic degree-n polynomials over GF(p), sparse ones first.

    Binomials (odd p only), trinomials and pentanomials come first; the enumeration then falls back to every monic
    polynomial with a nonzero constant term so that it always reaches an irreducible one.
    """
    units = range(1, p)
    if p != 2:
        for c in units:
            yield _monic(n, {0: c})
    for i in range(1, n):
        for d, c in itertools.product(units, units):
            yield _monic(n, {0: c, i: d})
    for i in range(3, n):
        for j in range(2, i):
            for k in range(1, j):
                for a, b, d, c in itertools.product(units, repeat=4):
                    yield _monic(n, {0: c, k: d, j: b, i: a})
    for code in range(p**n):
        low = dense.from_code(code, p, n)
        if low and low[0]:
            yield low + [0] * (n - len(low)) + [1]


@functools.lru_cache(maxsize=None)
def find_irreducible(p: int, n: int) -> tuple[int, ...]:
    """Returns the first irreducible monic polynomial of degree n over GF(p), least significant coefficient first."""
    if n < 1:
        raise ValueError("degree must be positive")
    for tried, f in enumerate(candidates(p, n), start=1):
        if is_irreducible(f, p):
            logger.debug("irreducible modulus of degree %d over GF(%d) found after %d candidates: %s", n, p, tried, f)
            return tuple(f)
    raise AssertionError("every degree has an irreducible polynomial")
