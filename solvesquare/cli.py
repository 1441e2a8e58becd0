"""Command-line interface for SolveSquare."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from solvesquare._version import __version__
from solvesquare.config import INPUT_CONFIG, InputConfig
from solvesquare.exceptions import InputError, RetriesExhaustedError
from solvesquare.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from solvesquare.prompt import MARK, TokenReader, read_coefficients
from solvesquare.solver import solve_square
from solvesquare.types.base import RootKind
from solvesquare.types.dto import RootResult

logger = get_logger(__name__)


def _format_value(value: float) -> str:
    """Return a root formatted with six significant digits.

    Examples:
        2.0 -> "2"; -0.0 -> "0"; 1/3 -> "0.333333"; 1e-7 -> "1e-07".
    """
    return f"{value + 0.0:g}"


def _format_report(result: RootResult) -> str:
    """Return the human-readable sentence describing ``result``."""
    if result.kind is RootKind.INFINITE:
        return "This equation has infinite number of roots"
    if result.kind is RootKind.NONE:
        return "This equation has no roots"
    if result.kind is RootKind.ONE:
        return f"This equation has one root: x = {_format_value(result.x)}"
    return (
        f"This equation has two roots: x1 = {_format_value(result.x1)}, "
        f"x2 = {_format_value(result.x2)}"
    )


def _positive_tries(value: str) -> int:
    """argparse type for ``--tries``."""
    try:
        config = InputConfig(max_tries=int(value))
        config.validate()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None
    return config.max_tries


def _run_solver(tries: int, as_json: bool) -> None:
    """Read coefficients from stdin, solve and print the outcome.

    Exits with status 1 when no complete set of coefficients could be read.
    With ``as_json`` the prompts go to stderr and only the JSON payload is
    written to stdout.
    """
    out = sys.stderr if as_json else sys.stdout
    if not as_json:
        print(f"{MARK}SolveSquare v{__version__}\n")
        print(f"{MARK}Let's find roots for equation Ax^2 + Bx + C = 0:")

    try:
        coefficients = read_coefficients(TokenReader(sys.stdin), out, tries)
    except RetriesExhaustedError as exc:
        # The last-try message is the final output of the run
        logger.debug(f"Failed to read coefficients: {exc}")
        sys.exit(1)
    except InputError as exc:
        logger.debug(f"Failed to read coefficients: {exc}")
        print(f"\n{MARK}ERROR: {exc}", file=out)
        sys.exit(1)

    logger.debug(
        "Solving with a=%r, b=%r, c=%r (discriminant %r)",
        coefficients.a,
        coefficients.b,
        coefficients.c,
        coefficients.discriminant,
    )
    result = solve_square(*coefficients.as_tuple())

    if as_json:
        print(json.dumps(result.to_dict(), allow_nan=False))
    else:
        print(f"{MARK}{_format_report(result)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``solvesquare`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="solvesquare",
        description="Find the real roots of Ax^2 + Bx + C = 0.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log errors"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON on stdout (prompts go to stderr)",
    )
    parser.add_argument(
        "--tries",
        type=_positive_tries,
        default=None,
        help=f"Attempts allowed per coefficient (default: {INPUT_CONFIG.max_tries})",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.ERROR)
    else:
        disable_debug_logging()

    tries = args.tries if args.tries is not None else INPUT_CONFIG.max_tries
    _run_solver(tries=tries, as_json=args.json)


if __name__ == "__main__":
    main()
