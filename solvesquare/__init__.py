"""SolveSquare: real roots of quadratic and linear equations.

Primary API:
    solve_square() - Roots of a*x^2 + b*x + c = 0
    solve_linear() - Roots of b*x + c = 0
    RootResult, RootKind - Tagged outcome of a solve
    Coefficients - Validated (a, b, c) triple

Example:
    from solvesquare import solve_square

    result = solve_square(1.0, -3.0, 2.0)
    result.kind   # RootKind.TWO
    result.roots  # (1.0, 2.0)
"""

from __future__ import annotations

from solvesquare import cli, logging
from solvesquare._version import __version__
from solvesquare.exceptions import (
    InputClosedError,
    InputError,
    InvalidNumberError,
    RetriesExhaustedError,
    SolveSquareError,
)
from solvesquare.solver import solve_linear, solve_square
from solvesquare.types.base import EPSILON, RootKind
from solvesquare.types.dto import Coefficients, RootResult

__all__ = [
    # Version
    "__version__",
    # Solvers
    "solve_square",
    "solve_linear",
    # Types
    "Coefficients",
    "RootResult",
    "RootKind",
    "EPSILON",
    # Errors
    "SolveSquareError",
    "InputError",
    "InvalidNumberError",
    "RetriesExhaustedError",
    "InputClosedError",
    # Utilities
    "cli",
    "logging",
]
