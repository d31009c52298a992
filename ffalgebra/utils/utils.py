# (C) 2024 Irreducible Inc.

import itertools
from typing import Iterator

# Witnesses making Miller-Rabin deterministic below 3.3 * 10^24.
_MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def bits_mask(n_bits: int) -> int:
    """Returns a mask for the least-significant bits.

    For example, bits_mask(4) returns 0x0f and bits_mask(9) returns 0x01ff.

    :param n_bits: the number of bits which will be 1.
    """
    return (1 << n_bits) - 1


def is_bit_set(x: int, i: int) -> bool:
    return (x >> i) & 1 != 0


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    for p in _MILLER_RABIN_BASES:
        if n % p == 0:
            return n == p

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _MILLER_RABIN_BASES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def primes() -> Iterator[int]:
    """Enumerates the primes in increasing order with an incremental sieve."""
    yield 2
    composites: dict[int, int] = {}
    for n in itertools.count(3, 2):
        step = composites.pop(n, None)
        if step is None:
            composites[n * n] = 2 * n
            yield n
        else:
            m = n + step
            while m in composites:
                m += step
            composites[m] = step


def trial_divide(n: int) -> int:
    # returns the smallest divisor of n which is > 1.
    for p in primes():
        if p * p > n:
            return n
        if n % p == 0:
            return p
    raise AssertionError("unreachable")


def factorize(n: int) -> list[int]:
    """Returns the prime factors of n with multiplicity, in increasing order."""
    factors = []
    while n > 1:
        factor = trial_divide(n)
        factors.append(factor)
        n //= factor
    return factors


def prime_factors(n: int) -> list[int]:
    """Returns the distinct prime divisors of n."""
    return sorted(set(factorize(n)))


def integer_root(n: int, k: int) -> int:
    """Returns floor(n ** (1 / k)) computed exactly."""
    if n < 0 or k < 1:
        raise ValueError("integer_root requires n >= 0 and k >= 1")
    if n < 2 or k == 1:
        return n
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def prime_power(n: int) -> tuple[int, int] | None:
    """Decomposes n as p^k with p prime, or returns None if n is not a prime power."""
    if n < 2:
        return None
    for k in range(n.bit_length(), 0, -1):
        root = integer_root(n, k)
        if root**k == n and is_prime(root):
            return root, k
    return None
