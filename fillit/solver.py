"""Backtracking search for the smallest square that holds every piece."""

from __future__ import annotations

from typing import Sequence

from fillit.board import EMPTY, Board

_START_SIZE = 4
_LOOKAHEAD = 3


def _is_candidate(board: Board, index: int) -> bool:
    end = min(index + _LOOKAHEAD, board.size)
    return any(board[k] == EMPTY for k in range(index, end))


def _fill(board: Board, pieces: Sequence[str], pos: int, letter: str) -> bool:
    if pos == len(pieces):
        return True
    shape = pieces[pos]
    next_letter = chr(ord(letter) + 1)
    for index in range(board.size):
        if not _is_candidate(board, index) or not board.can_place(shape, index):
            continue
        board.place(shape, letter, index)
        if _fill(board, pieces, pos + 1, next_letter):
            return True
        board.remove(shape, index)
    return False


def backtrack(board: Board, pieces: Sequence[str], letter: str = "A") -> bool:
    """Place every piece on ``board``, lettered from ``letter`` on; report success.

    On failure the board is left as it was.
    """
    if len(letter) != 1:
        raise ValueError(f"invalid piece letter {letter!r}")
    return _fill(board, list(pieces), 0, letter)


def solve(pieces: Sequence[str]) -> Board:
    """Return the smallest board, grown one square at a time, that holds all pieces."""
    board = Board(_START_SIZE)
    while not backtrack(board, pieces, "A"):
        board = Board(board.size + 1)
    return board