from __future__ import annotations

from math import exp, log, log1p
from typing import Sequence

from src.bezier2d.combinatorics import binomial
from src.bezier2d.constants import CURVE_SAMPLES
from src.bezier2d.geometry import FloatPoint, IntPoint


def bernstein_poly(n: int, i: int, t: float) -> float:
    coefficient = binomial(n, i)
    try:
        return coefficient * t**i * (1.0 - t) ** (n - i)
    except OverflowError:
        # coefficient exceeds the float range; only 0 < i < n gets here
        if t <= 0.0 or t >= 1.0:
            return 0.0
        return exp(log(coefficient) + i * log(t) + (n - i) * log1p(-t))


def evaluate(points: Sequence[IntPoint], t: float) -> IntPoint:
    """Point of the degree ``len(points) - 1`` Bezier curve at ``t``.

    The weighted sum is accumulated in floats and truncated toward zero.
    """
    if not points:
        raise ValueError("evaluate requires at least one control point.")
    degree = len(points) - 1
    total = FloatPoint(0.0, 0.0)
    for i, point in enumerate(points):
        weight = bernstein_poly(degree, i, t)
        total = total.add(FloatPoint(point.x * weight, point.y * weight))
    return total.truncate()


def sample_curve(points: Sequence[IntPoint], n_samples: int = CURVE_SAMPLES) -> list[IntPoint]:
    if n_samples < 2:
        raise ValueError("n_samples must be at least 2.")
    last = n_samples - 1
    return [evaluate(points, i / last) for i in range(n_samples)]
