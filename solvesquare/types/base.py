"""Base constants and enums for equation solving."""

from __future__ import annotations

import sys
from enum import IntEnum

#: Absolute threshold below which a value is treated as zero.
#:
#: This is the double-precision machine epsilon applied as an absolute, not
#: relative, tolerance. Coefficients of very large magnitude can produce
#: rounding error in the discriminant above this threshold and be classified
#: differently than exact arithmetic would.
EPSILON = sys.float_info.epsilon


class RootKind(IntEnum):
    """Shape of a solve outcome."""

    #: Every real number satisfies the equation.
    INFINITE = -1
    #: No real number satisfies the equation.
    NONE = 0
    #: A single root (a repeated quadratic root or a linear root).
    ONE = 1
    #: Two distinct roots.
    TWO = 2

    @classmethod
    def from_string(cls, value: str) -> "RootKind":
        """Parse a string into a RootKind enum value.

        Args:
            value: Case-insensitive string name (e.g., "two", "INFINITE").

        Returns:
            The corresponding RootKind enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid root kind '{value}'. Valid values are: {valid}"
            ) from None
