"""Linear and quadratic equation solvers.

Zero tests use the absolute ``EPSILON`` threshold from
``solvesquare.types.base``.
"""

from __future__ import annotations

import math
from typing import Tuple

from solvesquare.logging import get_logger
from solvesquare.types.base import EPSILON
from solvesquare.types.dto import RootResult

logger = get_logger(__name__)


def solve_linear(b: float, c: float) -> RootResult:
    """Solve ``b*x + c = 0``.

    Args:
        b: Coefficient of ``x``.
        c: Constant term.

    Returns:
        ONE with ``-c / b`` when ``b`` is non-negligible; otherwise INFINITE
        when ``c`` is also negligible, else NONE.
    """
    if abs(b) < EPSILON:
        if abs(c) < EPSILON:
            logger.debug("Linear: b=%r and c=%r negligible, infinite roots", b, c)
            return RootResult.infinite()
        logger.debug("Linear: b=%r negligible, c=%r is not, no roots", b, c)
        return RootResult.no_roots()

    x = -c / b
    logger.debug("Linear: b=%r, c=%r -> x=%r", b, c, x)
    return RootResult.one(x)


def _discriminant(a: float, b: float, c: float) -> Tuple[float, float, float]:
    """Return ``(d, b, scale)`` for ``b^2 - 4ac`` computed without overflow.

    ``scale`` is 1.0 and ``d``, ``b`` are unchanged unless ``b^2 - 4ac``
    overflows; then ``d`` and ``b`` belong to the coefficients divided by
    ``scale = max(|a|, |b|, |c|)``.
    """
    d = b * b - 4 * a * c
    if math.isfinite(d):
        return d, b, 1.0

    scale = max(abs(a), abs(b), abs(c))
    a, b, c = a / scale, b / scale, c / scale
    d = b * b - 4 * a * c
    logger.debug("Quadratic: discriminant overflows, rescaled by %r", scale)
    return d, b, scale


def _root(a: float, numerator: float, scale: float) -> float:
    # Dividing by 2 and by a before scaling never yields NaN; roots beyond the
    # float range come out as inf/-inf.
    return numerator / 2 / a * scale


def solve_square(a: float, b: float, c: float) -> RootResult:
    """Solve ``a*x^2 + b*x + c = 0``.

    A negligible ``a`` reduces the equation to ``b*x + c = 0`` and the result
    of ``solve_linear`` is returned as-is. Otherwise the discriminant
    ``d = b^2 - 4ac`` decides the shape:

    * ``d < -EPSILON``: NONE.
    * ``|d|`` within ``EPSILON``: ONE, the repeated root ``-b / (2a)``.
    * ``d >= EPSILON``: TWO, smaller root first.

    When ``b^2 - 4ac`` overflows a float, the shape is decided on the
    discriminant of the coefficients divided by their largest magnitude.
    Roots outside the float range are reported as ``inf``/``-inf``; no result
    carries NaN.

    Args:
        a: Coefficient of ``x^2``.
        b: Coefficient of ``x``.
        c: Constant term.

    Returns:
        The classified roots.
    """
    if abs(a) < EPSILON:
        logger.debug("Quadratic: a=%r negligible, solving as linear", a)
        return solve_linear(b, c)

    d, b_scaled, scale = _discriminant(a, b, c)
    if d < -EPSILON:
        logger.debug("Quadratic: d=%r negative, no roots", d)
        return RootResult.no_roots()

    if d < EPSILON:
        x = _root(a, -b_scaled, scale)
        logger.debug("Quadratic: d=%r treated as zero -> x=%r", d, x)
        return RootResult.one(x)

    sqrt_d = math.sqrt(d)
    x1 = _root(a, -b_scaled - sqrt_d, scale)
    x2 = _root(a, -b_scaled + sqrt_d, scale)
    # Negative a flips the order
    if x1 > x2:
        x1, x2 = x2, x1
    logger.debug("Quadratic: d=%r -> x1=%r, x2=%r", d, x1, x2)
    return RootResult.two(x1, x2)
