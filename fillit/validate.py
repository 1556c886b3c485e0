"""Checks that an input file holds well-formed tetromino blocks."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from fillit.strutil import split_words, substring

MAX_PIECES = 26
_BLOCK_STRIDE = 21
_BLOCK_LENGTH = 20
_MIN_CONNECTIONS = 6


class InvalidInputError(ValueError):
    """Raised when the input does not describe a valid set of tetrominoes."""


class _Step(enum.Enum):
    INVALID = 0
    DONE = 1
    MORE = 2


@dataclass
class _Cursor:
    text: str
    i: int = 0
    x: int = 0
    y: int = 0

    def char(self, offset: int = 0) -> str:
        pos = self.i + offset
        return self.text[pos] if pos < len(self.text) else ""

    def step(self) -> _Step:
        """Handle the character after a row: a line break or the end."""
        c, nxt = self.char(), self.char(1)
        if c == "\n" and nxt:
            self.x = 0
            self.y += 1
            self.i += 1
        elif c == "\n" and not nxt and self.x == 4:
            return _Step.DONE if self.y == 3 else _Step.INVALID
        else:
            return _Step.INVALID
        if self.y == 4 and self.char() == "\n":
            self.x = 0
            self.y = 0
            self.i += 1
        return _Step.MORE


def count_pieces(text: str) -> int:
    """Count the blocks in ``text``; blocks are four lines and a separator."""
    pieces = 0
    newlines = 1
    for pos, c in enumerate(text):
        if c == "\n":
            newlines += 1
        if newlines == 5 and pos + 1 < len(text):
            pieces += 1
            newlines = 0
    return pieces + 1


def check_layout(text: str) -> bool:
    """Check that rows of '.' and '#' form four-line blocks ending in a newline."""
    cursor = _Cursor(text)
    while cursor.char():
        while cursor.char() and cursor.x < 4:
            if cursor.char() not in ".#":
                return False
            cursor.i += 1
            cursor.x += 1
        if cursor.step() is _Step.INVALID:
            return False
        # A second step only ever moves over one more line break.
        if cursor.step() is _Step.DONE:
            return True
    return True


def check_hash_counts(text: str) -> bool:
    """Check that every 21-character block holds exactly four '#'."""
    return all(
        text[start:start + _BLOCK_STRIDE].count("#") == 4
        for start in range(0, len(text), _BLOCK_STRIDE)
    )


def check_connections(block: str) -> bool:
    """Check that the '#' cells of one block touch each other at least six times.

    Each side shared by two '#' cells is counted from both cells.
    """
    rows = split_words(block, "\n")

    def is_hash(y: int, x: int) -> bool:
        return 0 <= y < len(rows) and 0 <= x < len(rows[y]) and rows[y][x] == "#"

    touches = 0
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            if c != "#":
                continue
            neighbours = []
            if y != 0:
                neighbours.append((y - 1, x))
            if y != 3:
                neighbours.append((y + 1, x))
            if x != 0:
                neighbours.append((y, x - 1))
            if x != 3:
                neighbours.append((y, x + 1))
            touches += sum(is_hash(ny, nx) for ny, nx in neighbours)
    return touches >= _MIN_CONNECTIONS


def check_blocks(text: str) -> bool:
    """Check that every block of ``text`` is a connected piece."""
    length = min(_BLOCK_LENGTH, len(text))
    return all(
        check_connections(substring(text, start, length))
        for start in range(0, _BLOCK_STRIDE * count_pieces(text), _BLOCK_STRIDE)
    )


def validate(text: str) -> int:
    """Validate the whole input and return the number of pieces in it."""
    if not check_layout(text):
        raise InvalidInputError("malformed layout")
    if not check_hash_counts(text):
        raise InvalidInputError("a block does not hold exactly four '#'")
    if not check_blocks(text):
        raise InvalidInputError("a block is not a connected tetromino")
    pieces = count_pieces(text)
    if pieces > MAX_PIECES:
        raise InvalidInputError(f"more than {MAX_PIECES} pieces")
    return pieces


def read_input(path: str | Path) -> str:
    """Read an input file; its text ends at the first NUL byte, if any."""
    data = Path(path).read_bytes()
    return data.decode("latin-1").split("\0", 1)[0]