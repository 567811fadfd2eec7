"""String measurement, searching, comparison and integer conversion.

Strings follow C-string rules: a NUL character (``"\\0"``) ends the
string, and anything after it is ignored. Searches return an index into
the given string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_SPACES = frozenset(" \t\n\v\f\r")


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    """Turn ``c`` into one character; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping around."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(s: Optional[str]) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. When the value leaves the 64-bit signed range, the result is
    that range's limit reduced to 32 bits. Otherwise the value wraps to
    32 bits. ``None`` or text without digits gives 0.
    """
    if s is None:
        return 0
    text = _cstr(s).lstrip("".join(_SPACES))
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    cutoff = LONG_MAX if sign > 0 else LONG_MAX + 1
    num = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if num * 10 + digit > cutoff:
            return _wrap_int32(LONG_MAX if sign > 0 else -(LONG_MAX + 1))
        num = num * 10 + digit
    return _wrap_int32(sign * num)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s`` up to its first NUL; ``None`` counts as 0."""
    if s is None:
        return 0
    return len(_cstr(s))


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of ``s`` up to its first NUL, or ``None`` for ``None``."""
    if s is None:
        return None
    return _cstr(s)


def strchr(s: Optional[str], c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: Optional[str], c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: Optional[str], needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` first occurs wholly within ``haystack[:length]``.

    An empty needle is found at index 0.
    """
    if haystack is None:
        return None
    if length < 0:
        raise ValueError("length must not be negative")
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:length].find(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal pair of code points, the end
    of a string counting as 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(map(ord, _cstr(s1)), map(ord, _cstr(s2)), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0