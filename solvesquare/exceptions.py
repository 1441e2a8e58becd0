"""Exception hierarchy for SolveSquare.

The solvers never raise: every finite input has a defined outcome. All
exceptions here belong to the input layer.
"""

from __future__ import annotations


class SolveSquareError(Exception):
    """Base class for SolveSquare errors."""


class InputError(SolveSquareError):
    """Base class for errors raised while reading coefficients."""


class InvalidNumberError(InputError, ValueError):
    """A token could not be parsed as a finite real number."""

    def __init__(self, token: str) -> None:
        super().__init__(f"'{token}' is not a finite real number")
        self.token = token


class RetriesExhaustedError(InputError):
    """Every attempt to read a variable was rejected."""

    def __init__(self, name: str, tries: int) -> None:
        super().__init__(f"No valid value for {name} after {tries} attempt(s)")
        self.name = name
        self.tries = tries


class InputClosedError(InputError, EOFError):
    """The input stream ended before a value was read."""
