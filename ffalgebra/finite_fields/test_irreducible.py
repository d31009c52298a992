# (C) 2024 Irreducible Inc.

import itertools

import pytest

from . import dense
from .irreducible import candidates, find_irreducible, is_irreducible


def monic_polynomials(p: int, n: int):
    for low in itertools.product(range(p), repeat=n):
        yield list(low) + [1]


def has_proper_factor(f: list[int], p: int) -> bool:
    n = dense.degree(f)
    for d in range(1, n // 2 + 1):
        for g in monic_polynomials(p, d):
            if not dense.mod(f, g, p):
                return True
    return False


@pytest.mark.parametrize("p", [2, 3])
@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_brute_force_agreement(p: int, n: int) -> None:
    for f in monic_polynomials(p, n):
        if n <= 3:
            expected = n == 1 or all(dense.mod(f, [-a % p, 1], p) for a in range(p))
        else:
            expected = not has_proper_factor(f, p)
        assert is_irreducible(f, p) == expected, f


@pytest.mark.parametrize(
    "p, counts",
    [
        (2, [2, 1, 2, 3, 6]),
        (3, [3, 3, 8, 18, 48]),
        (5, [5, 10, 40, 150]),
    ],
)
def test_gauss_counts(p: int, counts: list[int]) -> None:
    for n, expected in enumerate(counts, start=1):
        assert sum(is_irreducible(f, p) for f in monic_polynomials(p, n)) == expected


def test_non_monic_and_constant() -> None:
    assert is_irreducible([2, 2, 2], 3) == is_irreducible([1, 1, 1], 3)
    assert not is_irreducible([1], 5)
    assert not is_irreducible([], 5)


@pytest.mark.parametrize("p, n", [(2, 8), (2, 16), (3, 6), (5, 4), (7, 3), (2, 40), (3, 12)])
def test_find_irreducible(p: int, n: int) -> None:
    f = list(find_irreducible(p, n))
    assert len(f) == n + 1 and f[-1] == 1
    assert is_irreducible(f, p)
    assert find_irreducible(p, n) is find_irreducible(p, n)


def test_candidate_order() -> None:
    first = list(itertools.islice(candidates(3, 4), 3))
    assert first == [[1, 0, 0, 0, 1], [2, 0, 0, 0, 1], [1, 1, 0, 0, 1]]
    assert next(candidates(2, 4)) == [1, 1, 0, 0, 1]
