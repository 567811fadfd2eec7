"""Building new strings from old: slicing, joining, trimming, splitting,
mapping, and size-bounded copy and concatenation.

Strings follow C-string rules: a NUL character (``"\\0"``) ends the
string, and anything after it is ignored. A missing string (``None``)
gives ``None`` back where a new string would be returned.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

from ftkit.search import strdup

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Turn ``c`` into one character; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _is_terminator(value: object) -> bool:
    return value == "\0" or value == 0


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Return ``s1`` followed by ``s2``, or ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return strdup(s1) + strdup(s2)


def strtrim(s1: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s1``."""
    if s1 is None or charset is None:
        return None
    return strdup(s1).strip(strdup(charset))


def split(s: Optional[str], c: CharLike) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty words.

    ``None`` gives an empty list. Splitting on NUL gives the whole string
    as a single word, if it is not empty.
    """
    if s is None:
        return []
    text = strdup(s)
    sep = _char(c)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a string from ``f(index, char)`` applied to each character of ``s``.

    A NUL produced by ``f`` ends the resulting string.
    """
    if s is None or f is None:
        return None
    pieces = []
    for index, ch in enumerate(strdup(s)):
        mapped = f(index, ch)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise TypeError("mapping function must return a single character")
        pieces.append(mapped)
    return strdup("".join(pieces))


def striteri(
    s: Optional[MutableSequence], f: Optional[Callable[[int, object], object]]
) -> None:
    """Call ``f(index, item)`` on each item of ``s`` up to a NUL, in place.

    ``s`` is a mutable sequence such as a list of characters or a
    ``bytearray``. When ``f`` returns something other than ``None``, that
    value replaces the item.
    """
    if s is None or f is None:
        return
    for index, item in enumerate(s):
        if _is_terminator(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: Optional[str], dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a fresh destination of ``dstsize`` slots.

    Returns the destination's text, which holds at most ``dstsize - 1``
    characters, and the full length of ``src``. A ``dstsize`` of 0 copies
    nothing. ``None`` gives an empty text and a length of 0.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if src is None:
        return "", 0
    text = strdup(src)
    if dstsize == 0:
        return "", len(text)
    return text[: dstsize - 1], len(text)


def strlcat(
    dst: Optional[str], src: Optional[str], dstsize: int
) -> tuple[Optional[str], int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` slots.

    Returns the new destination text and the length the full result would
    have had: ``len(dst) + len(src)``, or ``dstsize + len(src)`` when
    ``dst`` already fills the buffer. If either string is missing,
    ``dst`` comes back unchanged with a length of 0.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if dst is None or src is None:
        return dst, 0
    head = strdup(dst)
    tail = strdup(src)
    if dstsize <= len(head):
        return head, dstsize + len(tail)
    room = dstsize - len(head) - 1
    return head + tail[:room], len(head) + len(tail)