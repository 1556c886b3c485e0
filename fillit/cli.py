"""Command line entry point: read a piece file and print the solved square."""

from __future__ import annotations

import sys
from typing import Sequence

from fillit.pieces import parse_pieces
from fillit.solver import solve
from fillit.validate import InvalidInputError, read_input, validate

USAGE = "usage: fillit source_file.fillit"
ERROR = "error"


def run(text: str) -> str:
    """Validate ``text``, solve it and return the rendered board."""
    validate(text)
    return solve(parse_pieces(text)).render()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver on the file named in ``argv``; always returns 0."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write(USAGE + "\n")
        return 0
    try:
        output = run(read_input(args[0]))
    except (OSError, InvalidInputError):
        sys.stdout.write(ERROR + "\n")
        return 0
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())