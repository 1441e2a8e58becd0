"""Interactive coefficient input.

Values are read as whitespace-separated tokens, so several coefficients may
be entered on a single line. A rejected token discards the rest of its line
before the next attempt, so leftover text from a bad line is never parsed as
the following value.
"""

from __future__ import annotations

import math
import re
from collections import deque
from typing import Deque, Optional, TextIO

from solvesquare.config import INPUT_CONFIG
from solvesquare.exceptions import (
    InputClosedError,
    InvalidNumberError,
    RetriesExhaustedError,
)
from solvesquare.logging import get_logger
from solvesquare.types.dto import Coefficients

logger = get_logger(__name__)

#: Prefix for every line written to the user.
MARK = "#--- "

COEFFICIENT_NAMES = ("A", "B", "C")

# Decimal notation with optional exponent; ASCII digits only
_REAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class TokenReader:
    """Whitespace token reader over a line-oriented text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Deque[str] = deque()

    def next_token(self) -> str:
        """Return the next token, reading more lines as needed.

        Raises:
            InputClosedError: If the stream ends first.
        """
        while not self._pending:
            line = self._stream.readline()
            if line == "":
                raise InputClosedError("Input ended before a value was read")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        """Drop the unread tokens of the current line."""
        self._pending.clear()


def parse_real(token: str) -> float:
    """Parse a finite real number in decimal or exponent notation.

    Raises:
        InvalidNumberError: If ``token`` is not such a number (including
            ``nan``, ``inf``, digit separators and non-ASCII digits), or if it
            overflows to infinity.
    """
    if _REAL_RE.fullmatch(token) is None:
        raise InvalidNumberError(token)
    value = float(token)
    if not math.isfinite(value):
        raise InvalidNumberError(token)
    return value


def read_value(
    name: str, reader: TokenReader, out: TextIO, tries: Optional[int] = None
) -> float:
    """Prompt for and read one real number.

    Args:
        name: Variable name shown in the prompt.
        reader: Source of input tokens.
        out: Stream receiving prompts and retry messages.
        tries: Attempts allowed; defaults to ``INPUT_CONFIG.max_tries``.

    Returns:
        The parsed value.

    Raises:
        RetriesExhaustedError: If every attempt was rejected.
        InputClosedError: If input ends before a valid value is read.
    """
    if tries is None:
        tries = INPUT_CONFIG.max_tries

    for attempt in range(1, tries + 1):
        out.write(f"{MARK}Enter a real-number value for {name}> ")
        out.flush()
        token = reader.next_token()
        try:
            value = parse_real(token)
        except InvalidNumberError as exc:
            reader.discard_line()
            logger.debug(
                "Rejected input for %s (attempt %d/%d): %s", name, attempt, tries, exc
            )
            if attempt < tries:
                out.write(f"{MARK}Incorrect input! Let's try again!\n")
            else:
                out.write(f"{MARK}Incorrect input! That was last try :(\n")
            continue
        logger.debug("Read %s = %r", name, value)
        return value

    raise RetriesExhaustedError(name, tries)


def read_coefficients(
    reader: TokenReader, out: TextIO, tries: Optional[int] = None
) -> Coefficients:
    """Read ``A``, ``B`` and ``C`` in order.

    Stops at the first variable whose attempts are exhausted; later variables
    are not prompted for.
    """
    a, b, c = (read_value(name, reader, out, tries) for name in COEFFICIENT_NAMES)
    return Coefficients(a, b, c)
