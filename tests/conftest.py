"""Global pytest configuration."""

from __future__ import annotations

import io
from typing import Callable

import pytest


@pytest.fixture
def feed_stdin(monkeypatch) -> Callable[[str], None]:
    """Return a function that replaces ``sys.stdin`` with the given text."""

    def _feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed
