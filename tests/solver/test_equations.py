"""Tests for the linear and quadratic solvers."""

from __future__ import annotations

import logging
import math

import pytest

from solvesquare.solver import solve_linear, solve_square
from solvesquare.types.base import EPSILON, RootKind
from solvesquare.types.dto import RootResult


def _residual(a: float, b: float, c: float, x: float) -> float:
    return a * x * x + b * x + c


# Linear solver


@pytest.mark.parametrize(
    "b,c",
    [(2.0, -4.0), (-3.0, 1.5), (1.0, 0.0), (0.5, 7.25), (-1e6, 3.0), (1e-3, 1.0)],
)
def test_linear_nonzero_slope_has_single_root(b: float, c: float) -> None:
    result = solve_linear(b, c)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(-c / b)


def test_linear_identity_has_infinite_roots() -> None:
    result = solve_linear(0.0, 0.0)
    assert result.kind is RootKind.INFINITE
    assert result.roots == ()
    assert result.count is None


@pytest.mark.parametrize("c", [5.0, -1.0, 1e-6])
def test_linear_contradiction_has_no_roots(c: float) -> None:
    result = solve_linear(0.0, c)
    assert result.kind is RootKind.NONE
    assert result.count == 0


def test_linear_negligible_slope_is_treated_as_zero() -> None:
    """Values below EPSILON in magnitude count as zero."""
    assert solve_linear(EPSILON / 2, 1.0).kind is RootKind.NONE
    assert solve_linear(-EPSILON / 2, EPSILON / 4).kind is RootKind.INFINITE


def test_linear_slope_at_epsilon_is_nonzero() -> None:
    result = solve_linear(EPSILON, EPSILON)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(-1.0)


# Quadratic solver: concrete cases


def test_two_distinct_roots() -> None:
    result = solve_square(1.0, -3.0, 2.0)
    assert result.kind is RootKind.TWO
    assert result.x1 == pytest.approx(1.0)
    assert result.x2 == pytest.approx(2.0)


def test_repeated_root() -> None:
    result = solve_square(1.0, 2.0, 1.0)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(-1.0)


def test_negative_discriminant_has_no_roots() -> None:
    assert solve_square(1.0, 0.0, 1.0) == RootResult.no_roots()


def test_zero_leading_coefficient_reduces_to_linear() -> None:
    result = solve_square(0.0, 2.0, -4.0)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(2.0)


def test_constant_nonzero_has_no_roots() -> None:
    assert solve_square(0.0, 0.0, 5.0).kind is RootKind.NONE


def test_all_zero_has_infinite_roots() -> None:
    assert solve_square(0.0, 0.0, 0.0).kind is RootKind.INFINITE


# Quadratic solver: properties


@pytest.mark.parametrize(
    "b,c",
    [(0.0, 0.0), (0.0, 3.0), (2.0, -4.0), (-7.5, 0.25), (EPSILON / 3, 1.0)],
)
def test_negligible_leading_coefficient_matches_linear(b: float, c: float) -> None:
    assert solve_square(0.0, b, c) == solve_linear(b, c)
    assert solve_square(EPSILON / 2, b, c) == solve_linear(b, c)


@pytest.mark.parametrize(
    "a,b,c",
    [
        (1.0, -3.0, 2.0),
        (2.0, 1.0, -1.0),
        (-1.0, 0.0, 4.0),
        (-2.0, 3.0, 5.0),
        (0.5, -0.25, -3.0),
        (3.0, 10.0, 1.0),
        (1.0, 0.0, -1e-4),
    ],
)
def test_positive_discriminant_gives_ordered_roots(a: float, b: float, c: float) -> None:
    assert b * b - 4 * a * c > 0
    result = solve_square(a, b, c)
    assert result.kind is RootKind.TWO
    assert result.count == 2
    assert result.x1 < result.x2
    for x in result.roots:
        assert _residual(a, b, c, x) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "a,b,c",
    [(1.0, 1.0, 1.0), (-1.0, 0.0, -2.0), (4.0, 1.0, 3.0), (0.1, 0.0, 0.1)],
)
def test_negative_discriminant_gives_none(a: float, b: float, c: float) -> None:
    assert b * b - 4 * a * c < 0
    assert solve_square(a, b, c).kind is RootKind.NONE


@pytest.mark.parametrize(
    "a,b,c,expected",
    [(1.0, -4.0, 4.0, 2.0), (-1.0, 2.0, -1.0, 1.0), (4.0, 4.0, 1.0, -0.5)],
)
def test_zero_discriminant_gives_repeated_root(
    a: float, b: float, c: float, expected: float
) -> None:
    result = solve_square(a, b, c)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(expected)
    assert _residual(a, b, c, result.x) == pytest.approx(0.0, abs=1e-12)


def test_negative_leading_coefficient_orders_roots_smaller_first() -> None:
    """-(x - 1)(x - 3) = -x^2 + 4x - 3."""
    result = solve_square(-1.0, 4.0, -3.0)
    assert result.roots == pytest.approx((1.0, 3.0))


def test_discriminant_within_epsilon_is_treated_as_zero() -> None:
    # b^2 - 4ac = EPSILON / 2
    a, c = 1.0, 0.0
    b = math.sqrt(EPSILON / 2)
    result = solve_square(a, b, c)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(-b / 2)


def test_slightly_negative_discriminant_within_epsilon_is_one_root() -> None:
    # c chosen so that d = -EPSILON / 2
    result = solve_square(1.0, 0.0, EPSILON / 8)
    assert result.kind is RootKind.ONE
    assert result.x == 0.0


def test_solvers_are_deterministic() -> None:
    assert solve_square(2.0, -5.0, 2.0) == solve_square(2.0, -5.0, 2.0)
    assert solve_linear(3.0, 1.0) == solve_linear(3.0, 1.0)


def test_solver_logs_classification_at_debug(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="solvesquare.solver.equations")
    solve_square(0.0, 0.0, 0.0)
    messages = [r.getMessage() for r in caplog.records]
    assert any("solving as linear" in m for m in messages)
    assert any("infinite roots" in m for m in messages)


# Quadratic solver: coefficients whose discriminant overflows


def test_overflowing_discriminant_is_classified_on_rescaled_coefficients() -> None:
    # b^2 - 4ac is inf - inf in floating point
    assert solve_square(1e200, 1e200, 1e200) == RootResult.no_roots()


def test_overflowing_discriminant_two_finite_roots() -> None:
    result = solve_square(1e200, 1e200, 1.0)
    assert result.kind is RootKind.TWO
    assert result.x1 == pytest.approx(-1.0)
    assert result.x2 == pytest.approx(0.0, abs=1e-12)


def test_overflowing_discriminant_repeated_root() -> None:
    result = solve_square(1e200, 2e200, 1e200)
    assert result.kind is RootKind.ONE
    assert result.x == pytest.approx(-1.0)


def test_near_max_coefficients_give_finite_roots() -> None:
    """x^2 + x - 1 scaled by 1e308: roots are -phi and 1/phi."""
    result = solve_square(1e308, 1e308, -1e308)
    phi = (1 + math.sqrt(5)) / 2
    assert result.roots == pytest.approx((-phi, 1 / phi))


def test_roots_beyond_float_range_are_infinite_not_nan() -> None:
    result = solve_square(1e-10, 1e300, 0.0)
    assert result.kind is RootKind.TWO
    assert result.x1 == -math.inf
    assert result.x2 == 0.0


@pytest.mark.parametrize(
    "a,b,c",
    [
        (1e200, 1e200, 1e200),
        (-1e300, 1e300, 1e300),
        (1e308, -1.7e308, 1e-300),
        (1e-15, 1e308, 1e308),
        (1.7e308, 1.7e308, -1.7e308),
    ],
)
def test_extreme_coefficients_never_produce_nan(a: float, b: float, c: float) -> None:
    result = solve_square(a, b, c)
    assert not any(math.isnan(x) for x in result.roots)
