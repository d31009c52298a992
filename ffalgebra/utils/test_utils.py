# (C) 2024 Irreducible Inc.

import itertools
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from .utils import factorize, integer_root, is_prime, prime_factors, prime_power, primes


def naive_is_prime(n: int) -> bool:
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def test_is_prime_small() -> None:
    for n in range(-5, 2000):
        assert is_prime(n) == naive_is_prime(n), n


def test_is_prime_large() -> None:
    assert is_prime(2**61 - 1)
    assert is_prime(2**31 - 1)
    assert not is_prime((2**31 - 1) * (2**61 - 1))
    # strong pseudoprime to bases 2, 3, 5 and 7
    assert not is_prime(3215031751)


def test_primes() -> None:
    first = list(itertools.islice(primes(), 25))
    assert first == [n for n in range(100) if naive_is_prime(n)]


@given(n=st.integers(1, 10**6))
def test_factorize(n: int) -> None:
    factors = factorize(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(p) for p in factors)
    assert prime_factors(n) == sorted(set(factors))


@given(n=st.integers(0, 2**200), k=st.integers(1, 12))
def test_integer_root(n: int, k: int) -> None:
    r = integer_root(n, k)
    assert r**k <= n < (r + 1) ** k


@pytest.mark.parametrize(
    "n, expected",
    [
        (2, (2, 1)),
        (9, (3, 2)),
        (64, (2, 6)),
        (243, (3, 5)),
        (2**61 - 1, (2**61 - 1, 1)),
        (3**39, (3, 39)),
        (1, None),
        (6, None),
        (36, None),
        (2**10 * 3, None),
    ],
)
def test_prime_power(n: int, expected: tuple[int, int] | None) -> None:
    assert prime_power(n) == expected
