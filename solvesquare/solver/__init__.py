"""Equation solvers.

Both solvers are pure functions over finite floats and always return a
``RootResult``; degenerate inputs map to the INFINITE or NONE shapes rather
than raising.
"""

from __future__ import annotations

from solvesquare.solver.equations import solve_linear, solve_square

__all__ = ["solve_linear", "solve_square"]
