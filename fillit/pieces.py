"""Turning input blocks into normalised 4x4 piece shapes."""

from __future__ import annotations

from fillit.validate import count_pieces

SHAPE_SIZE = 16
_BLOCK_STRIDE = 21
_BLOCK_TEXT = 19


def _check_shape(shape: str) -> None:
    if len(shape) != SHAPE_SIZE:
        raise ValueError(f"a shape has {SHAPE_SIZE} cells, got {len(shape)}")


def _require_filled(shape: str) -> None:
    if all(c == "." for c in shape):
        raise ValueError("shape has no filled cell")


def shift(shape: str, n: int) -> str:
    """Move every cell of a 16-cell shape ``n`` places towards the start."""
    _check_shape(shape)
    if n < 0:
        raise ValueError("shift must not be negative")
    return (shape[n:] + "." * min(n, SHAPE_SIZE))[:SHAPE_SIZE]


def shift_left(shape: str) -> str:
    """Shift the shape left until its first column holds a filled cell."""
    _check_shape(shape)
    _require_filled(shape)
    while all(c == "." for c in shape[0::4]):
        shape = shift(shape, 1)
    return shape


def shift_top(shape: str) -> str:
    """Shift the shape up until its first row holds a filled cell."""
    _check_shape(shape)
    _require_filled(shape)
    while all(c == "." for c in shape[:4]):
        shape = shift(shape, 4)
    return shape


def parse_block(block: str) -> str:
    """Turn a block of four text rows into a shape pushed to the top-left corner."""
    shape = block.replace("\n", "")
    return shift_left(shift_top(shape))


def parse_pieces(text: str) -> list[str]:
    """Return the shapes of every block in ``text``, in input order."""
    return [
        parse_block(text[start:start + _BLOCK_TEXT])
        for start in range(0, _BLOCK_STRIDE * count_pieces(text), _BLOCK_STRIDE)
    ]