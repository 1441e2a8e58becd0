"""Module entrypoint for ``python -m solvesquare``."""

from solvesquare.cli import main

main()
