"""The square board that pieces are fitted onto."""

from __future__ import annotations

import math
from typing import Iterator

from fillit.pieces import SHAPE_SIZE

EMPTY = "."
FILLED = "#"
_SMALL_LIMIT = 16
_SHAPE_WIDTH = 4
_PIECE_CELLS = 4


def next_square(count: int) -> int:
    """Return the smallest perfect square, at least 1, that is not below ``count``."""
    if count < 1:
        return 1
    root = math.isqrt(count)
    if root * root < count:
        root += 1
    return root * root


def _check_shape(shape: str) -> None:
    if len(shape) != SHAPE_SIZE:
        raise ValueError(f"a shape has {SHAPE_SIZE} cells, got {len(shape)}")


class Board:
    """A square grid of cells, each empty or holding a piece letter."""

    def __init__(self, size: int) -> None:
        self.size = next_square(size)
        self.side = math.isqrt(self.size)
        self._cells = [EMPTY] * self.size

    def __str__(self) -> str:
        return "".join(self._cells)

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> str:
        return self._cells[index]

    @property
    def is_small(self) -> bool:
        """True for boards of at most sixteen cells, which are walked differently."""
        return self.size <= _SMALL_LIMIT

    def _walk(self, index: int) -> Iterator[tuple[int, int]]:
        if index < 0:
            raise ValueError("index must not be negative")
        return self._walk_small(index) if self.is_small else self._walk_large(index)

    def _walk_small(self, index: int) -> Iterator[tuple[int, int]]:
        """Pair board cells with shape cells on a board no wider than a shape."""
        side = self.side
        diff = _SHAPE_WIDTH - side
        limit = side
        cell, pos = index, 0
        for _ in range(side):
            if cell >= self.size or limit > SHAPE_SIZE:
                return
            while cell < self.size and pos < limit and pos < SHAPE_SIZE:
                yield cell, pos
                cell += 1
                pos += 1
            pos += diff
            limit += diff + limit

    def _walk_large(self, index: int) -> Iterator[tuple[int, int]]:
        """Pair board cells with shape cells, four per row, on a wide board."""
        gap = self.side - _SHAPE_WIDTH
        limit = _SHAPE_WIDTH
        cell, pos = index, 0
        for _ in range(_SHAPE_WIDTH):
            if cell >= self.size or limit > self.size:
                return
            for _ in range(_SHAPE_WIDTH):
                if cell >= self.size:
                    break
                yield cell, pos
                cell += 1
                pos += 1
            cell += gap
            limit += self.side

    def can_place(self, shape: str, index: int) -> bool:
        """True if all four filled cells of ``shape`` land on free cells from ``index``."""
        _check_shape(shape)
        placed = 0
        for cell, pos in self._walk(index):
            if self._cells[cell] == EMPTY and shape[pos] == FILLED:
                at_row_end = (cell + 1) % self.side == 0
                if at_row_end and pos + 1 < SHAPE_SIZE and shape[pos + 1] == FILLED:
                    return False
                placed += 1
                if placed == _PIECE_CELLS:
                    return True
        return False

    def place(self, shape: str, letter: str, index: int) -> None:
        """Write ``letter`` into the free cells that ``shape`` covers from ``index``."""
        _check_shape(shape)
        if len(letter) != 1 or letter == EMPTY:
            raise ValueError(f"invalid piece letter {letter!r}")
        written = 0
        for cell, pos in self._walk(index):
            if self.is_small and written == _PIECE_CELLS:
                break
            if self._cells[cell] == EMPTY and shape[pos] == FILLED:
                self._cells[cell] = letter
                written += 1

    def remove(self, shape: str, index: int) -> None:
        """Clear the cells that ``shape`` covers from ``index``."""
        _check_shape(shape)
        for cell, pos in self._walk(index):
            if self._cells[cell] != EMPTY and shape[pos] == FILLED:
                self._cells[cell] = EMPTY

    def render(self) -> str:
        """Return the board as text, one row per line, each ending in a newline."""
        text = str(self)
        return "".join(
            text[start:start + self.side] + "\n"
            for start in range(0, self.size, self.side)
        )