"""Immutable containers for solver inputs and outputs.

``RootResult`` is a tagged variant: the ``kind`` decides how many values
``roots`` holds, so a caller can never read a root that was not computed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from solvesquare.types.base import RootKind

_ARITY: Dict[RootKind, int] = {
    RootKind.INFINITE: 0,
    RootKind.NONE: 0,
    RootKind.ONE: 1,
    RootKind.TWO: 2,
}


@dataclass(frozen=True)
class Coefficients:
    """Coefficients of ``a*x^2 + b*x + c = 0``.

    Attributes:
        a: Coefficient of ``x^2``.
        b: Coefficient of ``x``.
        c: Constant term.
    """

    a: float
    b: float
    c: float

    @property
    def discriminant(self) -> float:
        """Return ``b^2 - 4ac``."""
        return self.b * self.b - 4 * self.a * self.c

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class RootResult:
    """Outcome of solving a linear or quadratic equation.

    Use the ``infinite``, ``no_roots``, ``one`` and ``two`` constructors rather
    than building instances directly.

    Attributes:
        kind: Shape of the outcome.
        roots: Root values; empty for INFINITE and NONE, one value for ONE,
            two values (smaller first) for TWO.
    """

    kind: RootKind
    roots: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        expected = _ARITY[self.kind]
        if len(self.roots) != expected:
            raise ValueError(
                f"{self.kind.name} result requires {expected} root value(s), "
                f"got {len(self.roots)}"
            )

    @classmethod
    def infinite(cls) -> "RootResult":
        return cls(RootKind.INFINITE)

    @classmethod
    def no_roots(cls) -> "RootResult":
        return cls(RootKind.NONE)

    @classmethod
    def one(cls, x: float) -> "RootResult":
        return cls(RootKind.ONE, (x,))

    @classmethod
    def two(cls, x1: float, x2: float) -> "RootResult":
        return cls(RootKind.TWO, (x1, x2))

    @property
    def count(self) -> Optional[int]:
        """Number of roots, or None when every real number is a root."""
        if self.kind is RootKind.INFINITE:
            return None
        return len(self.roots)

    @property
    def x(self) -> float:
        """The single root of a ONE result.

        Raises:
            ValueError: If the result is not ONE.
        """
        if self.kind is not RootKind.ONE:
            raise ValueError(f"{self.kind.name} result has no single root")
        return self.roots[0]

    @property
    def x1(self) -> float:
        """The smaller root of a TWO result."""
        if self.kind is not RootKind.TWO:
            raise ValueError(f"{self.kind.name} result has no root pair")
        return self.roots[0]

    @property
    def x2(self) -> float:
        """The larger root of a TWO result."""
        if self.kind is not RootKind.TWO:
            raise ValueError(f"{self.kind.name} result has no root pair")
        return self.roots[1]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation.

        Roots outside the float range (``inf``/``-inf``) become ``None`` so the
        mapping encodes as strict JSON.
        """
        roots = [x if math.isfinite(x) else None for x in self.roots]
        return {"kind": self.kind.name.lower(), "roots": roots}
