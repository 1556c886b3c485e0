"""String helpers with C-library semantics: searching, comparing, slicing."""

from __future__ import annotations

from typing import Callable

_TRIM_CHARS = " \n\t"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """Strip spaces, newlines and tabs from both ends of ``text``."""
    return text.strip(_TRIM_CHARS)


def find(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle``, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0 whatever the limit.
    """
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def compare(a: str, b: str) -> int:
    """Compare two strings, returning the difference of the first unequal characters.

    The end of a string counts as a character with code 0, so the result is
    zero only for equal strings, negative when ``a`` sorts first and positive
    otherwise.
    """
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def compare_n(a: str, b: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return compare(a[:n], b[:n])


def equal(a: str | None, b: str | None) -> bool:
    """True when both strings are given and equal."""
    if a is None or b is None:
        return False
    return compare(a, b) == 0


def equal_n(a: str | None, b: str | None, n: int) -> bool:
    """True when both strings are given and agree in their first ``n`` characters."""
    if a is None or b is None:
        return False
    return compare_n(a, b, n) == 0


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def join(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def index_of(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    The NUL character is found at the end of the string.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def last_index_of(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    The NUL character is found at the end of the string.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def lcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the new contents (at most ``size - 1`` characters when any room
    was left) and the length the full concatenation was meant to have.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_chars(text: str, func: Callable[[str], str]) -> str:
    """Return a new string made of ``func`` applied to each character."""
    return "".join(func(c) for c in text)


def map_chars_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    return "".join(func(i, c) for i, c in enumerate(text))