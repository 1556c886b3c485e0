"""Integer and ASCII character helpers."""

from __future__ import annotations

import math
from typing import overload

_WHITESPACE = frozenset(" \n\t\v\f\r")
_FACTORIAL_LIMIT = 12


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def exact_sqrt(n: int) -> int:
    """Return the integer square root of ``n`` if ``n`` is a perfect square, else 0."""
    if n < 0:
        return 0
    root = math.isqrt(n)
    return root if root * root == n else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. No digits yields 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def factorial(n: int) -> int:
    """Return ``n!`` for 0 <= n <= 12, and 0 outside that range."""
    if n < 0 or n > _FACTORIAL_LIMIT:
        return 0
    return math.factorial(n)


def int_range(low: int, high: int) -> list[int]:
    """Return the integers from ``low`` up to but not including ``high``."""
    return list(range(low, high))


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code point in 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) < 127


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code