# (C) 2024 Irreducible Inc.

"""Dense polynomials over GF(p).

A polynomial is a list of coefficients in [0, p), least significant first, with no trailing zeros. The zero
polynomial is the empty list. These helpers back the extension field arithmetic and the irreducibility search, where
going through the generic polynomial types would be needlessly slow.
"""

from ..errors import ElementOutOfRangeError

Dense = list[int]


def trim(a: Dense) -> Dense:
    while a and a[-1] == 0:
        a.pop()
    return a


def degree(a: Dense) -> int:
    return len(a) - 1


def add(a: Dense, b: Dense, p: int) -> Dense:
    if len(a) < len(b):
        a, b = b, a
    c = list(a)
    for i, bi in enumerate(b):
        c[i] = (c[i] + bi) % p
    return trim(c)


def neg(a: Dense, p: int) -> Dense:
    return [-ai % p for ai in a]


def sub(a: Dense, b: Dense, p: int) -> Dense:
    return add(a, neg(b, p), p)


def scale(a: Dense, c: int, p: int) -> Dense:
    return trim([ai * c % p for ai in a])


def mul(a: Dense, b: Dense, p: int) -> Dense:
    if not a or not b:
        return []
    c = [0] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        for j, bj in enumerate(b):
            c[i + j] += ai * bj
    return trim([ci % p for ci in c])


def divmod_(a: Dense, b: Dense, p: int) -> tuple[Dense, Dense]:
    if not b:
        raise ZeroDivisionError("polynomial division by zero")
    r = list(a)
    if len(r) < len(b):
        return [], r
    lc_inv = pow(b[-1], -1, p)
    q = [0] * (len(r) - len(b) + 1)
    for k in range(len(q) - 1, -1, -1):
        c = r[k + len(b) - 1] * lc_inv % p
        q[k] = c
        if c:
            for j, bj in enumerate(b):
                r[k + j] = (r[k + j] - c * bj) % p
    return trim(q), trim(r[: len(b) - 1])


def mod(a: Dense, b: Dense, p: int) -> Dense:
    return divmod_(a, b, p)[1]


def monic(a: Dense, p: int) -> Dense:
    if not a or a[-1] == 1:
        return a
    return scale(a, pow(a[-1], -1, p), p)


def gcd(a: Dense, b: Dense, p: int) -> Dense:
    """Returns the monic greatest common divisor of a and b."""
    while b:
        a, b = b, mod(a, b, p)
    return monic(a, p)


def powmod(a: Dense, n: int, m: Dense, p: int) -> Dense:
    acc = [1]
    base = mod(a, m, p)
    while n:
        if n & 1:
            acc = mod(mul(acc, base, p), m, p)
        n >>= 1
        if n:
            base = mod(mul(base, base, p), m, p)
    return mod(acc, m, p)


def inverse_mod(a: Dense, m: Dense, p: int) -> Dense:
    """Returns the inverse of a modulo m with the extended Euclidean algorithm."""
    r0, r1 = m, mod(a, m, p)
    t0, t1 = [], [1]
    while len(r1) > 1:
        q, r = divmod_(r0, r1, p)
        r0, r1 = r1, r
        t0, t1 = t1, sub(t0, mul(q, t1, p), p)
    if not r1:
        raise ZeroDivisionError("polynomial is not invertible")
    return scale(t1, pow(r1[0], -1, p), p)


def from_code(code: int, p: int, n: int) -> Dense:
    """Decodes the base-p digits of code into a polynomial of degree < n."""
    digits = []
    for _ in range(n):
        code, digit = divmod(code, p)
        digits.append(digit)
    if code:
        raise ElementOutOfRangeError(f"code does not fit {n} base-{p} digits")
    return trim(digits)


def to_code(a: Dense, p: int) -> int:
    code = 0
    for ai in reversed(a):
        code = code * p + ai
    return code
