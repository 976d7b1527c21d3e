from math import comb, factorial

import pytest

from src.bezier2d.combinatorics import binomial


def test_binomial_matches_factorial_formula():
    for n in range(21):
        for k in range(n + 1):
            assert binomial(n, k) == factorial(n) // (factorial(k) * factorial(n - k))


def test_binomial_edge_values():
    assert binomial(0, 0) == 1
    assert binomial(7, 0) == 1
    assert binomial(7, 7) == 1
    assert binomial(3, 4) == 0
    assert binomial(0, 1) == 0


def test_binomial_is_exact_for_large_degree():
    assert binomial(300, 150) == comb(300, 150)


def test_binomial_rejects_negative_arguments():
    with pytest.raises(ValueError):
        binomial(-1, 0)
    with pytest.raises(ValueError):
        binomial(4, -2)
