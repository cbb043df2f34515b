# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation over the rationals.

The polynomial is not reduced modulo a prime, so the basis weights

    L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)

are genuine fractions. Dividing each term on its own truncates, and the
truncation errors do not cancel in the sum (points at x = 1, 2, 4 are the
classic example). Every term is therefore kept as a :class:`Fraction`,
which reduces by gcd after each operation, and only the final sum is
turned back into an integer.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Sequence

from .errors import DuplicateAbscissa, InsufficientShares, NonIntegerResult
from .models import Point
from .utils.logging import get_logger

log = get_logger("interpolate")


def _check_distinct(points: Sequence[Point]) -> None:
    seen: set[int] = set()
    for p in points:
        if p.x in seen:
            raise DuplicateAbscissa(f"x={p.x} appears more than once")
        seen.add(p.x)


def _basis(points: Sequence[Point], i: int, x: int) -> Fraction:
    xi = points[i].x
    num = 1
    den = 1
    for j, p in enumerate(points):
        if j == i:
            continue
        num *= x - p.x
        den *= xi - p.x
    return Fraction(num, den)


def _to_integer(value: Fraction, allow_rounding: bool) -> int:
    if value.denominator == 1:
        return value.numerator
    if not allow_rounding:
        raise NonIntegerResult(value.numerator, value.denominator)
    rounded = round(value)
    log.warning("rounded non-integer interpolation %s to %d", value, rounded)
    return rounded


def interpolate_at(points: Sequence[Point], x: int, *, allow_rounding: bool = False) -> int:
    """Evaluate the polynomial through ``points`` at ``x``.

    ``len(points)`` fixes the degree at ``len(points) - 1``. Raises
    :class:`NonIntegerResult` unless ``allow_rounding`` is set, in which case
    the nearest integer (ties to even) is returned.
    """
    points = list(points)
    if not points:
        raise InsufficientShares("at least one point is required")
    _check_distinct(points)

    total = Fraction(0)
    for i, p in enumerate(points):
        total += p.y * _basis(points, i, x)
    log.debug("interpolated %d points at x=%d", len(points), x)
    return _to_integer(total, allow_rounding)


def interpolate(points: Sequence[Point], *, allow_rounding: bool = False) -> int:
    """Return the constant term of the polynomial through ``points``."""
    return interpolate_at(points, 0, allow_rounding=allow_rounding)


def evaluate_polynomial(coeffs: Sequence[int], x: int) -> int:
    """Evaluate ``coeffs[0] + coeffs[1]*x + ...`` with Horner's rule."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def sample_points(coeffs: Sequence[int], xs: Iterable[int]) -> list[Point]:
    """Points of the polynomial ``coeffs`` at each abscissa in ``xs``."""
    return [Point(x, evaluate_polynomial(coeffs, x)) for x in xs]


__all__ = ["interpolate", "interpolate_at", "evaluate_polynomial", "sample_points"]
