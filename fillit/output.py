"""Small helpers that write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` as it is."""
    _target(stream).write(text)


def put_line(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n``."""
    _target(stream).write(str(n))


def put_lines(lines: Iterable[str], stream: TextIO | None = None) -> None:
    """Write every string in ``lines``, each followed by a newline."""
    out = _target(stream)
    for line in lines:
        put_line(line, out)