"""Formatted output with a small set of conversions.

Supported conversions:

``%c``
    one character; an integer is truncated to a byte.
``%s``
    a string, cut at its first NUL; ``None`` prints ``(null)``.
``%p``
    an address in lower-case hexadecimal after ``0x``. An integer is taken
    as the address and any other object uses its ``id()``. ``None`` or a
    zero address prints ``(nil)``.
``%d`` and ``%i``
    a signed 32-bit decimal integer.
``%u``
    an unsigned 32-bit decimal integer.
``%x`` and ``%X``
    an unsigned 32-bit integer in lower- or upper-case hexadecimal.
``%%``
    a literal percent sign.

Integer arguments wrap to 32 bits, and pointers to 64 bits. No flags, widths
or precisions are accepted. A lone ``%`` at the end of the format, or an
unknown conversion, raises :class:`FormatError`.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, Optional, TextIO

__all__ = ["FormatError", "render", "printf", "main"]

_CONVERSIONS = frozenset("cspdiuxX%")
_INT_CONVERSIONS = frozenset("diuxX")
_MISSING = object()

_UINT_MASK = 0xFFFFFFFF
_ADDR_MASK = 2**64 - 1
_INT_MAX = 2**31 - 1


class FormatError(ValueError):
    """Raised for a malformed format string."""


def _tokens(fmt: str) -> Iterator[str]:
    """Split ``fmt`` into literal text and two-character ``%`` directives.

    Literal chunks never contain ``%``, so a chunk starting with ``%`` is
    always a directive. The format ends at its first NUL.
    """
    chars = iter(fmt.split("\0", 1)[0])
    literal: list[str] = []
    for ch in chars:
        if ch != "%":
            literal.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise FormatError("format ends with a lone '%'")
        if conversion not in _CONVERSIONS:
            raise FormatError(f"unknown conversion '%{conversion}'")
        if literal:
            yield "".join(literal)
            literal.clear()
        yield "%" + conversion
    if literal:
        yield "".join(literal)


def _require_int(arg: Any, conversion: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{conversion} needs an int, got {type(arg).__name__}")
    return arg


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value > _INT_MAX else value


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c needs a single character, got {len(arg)} characters")
        return arg
    return chr(_require_int(arg, "c") & 0xFF)


def _format_string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a str, got {type(arg).__name__}")
    return arg.split("\0", 1)[0]


def _format_pointer(arg: Any) -> str:
    if arg is None:
        return "(nil)"
    if isinstance(arg, int) and not isinstance(arg, bool):
        address = arg & _ADDR_MASK
    else:
        address = id(arg) & _ADDR_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(conversion: str, arg: Any) -> str:
    if conversion == "c":
        return _format_char(arg)
    if conversion == "s":
        return _format_string(arg)
    if conversion == "p":
        return _format_pointer(arg)
    value = _require_int(arg, conversion)
    if conversion in ("d", "i"):
        return str(_signed32(value))
    unsigned = value & _UINT_MASK
    if conversion == "u":
        return str(unsigned)
    if conversion == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` produces with ``args``.

    Raises FormatError for a malformed format and TypeError when an argument
    is missing or of the wrong kind. Extra arguments are ignored.
    """
    remaining = iter(args)
    pieces: list[str] = []
    for token in _tokens(fmt):
        if not token.startswith("%"):
            pieces.append(token)
            continue
        conversion = token[1]
        if conversion == "%":
            pieces.append("%")
            continue
        arg = next(remaining, _MISSING)
        if arg is _MISSING:
            raise TypeError("not enough arguments for format string")
        pieces.append(_convert(conversion, arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written. Nothing is written when the
    format or the arguments are invalid.
    """
    text = render(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)


def _cli_args(fmt: str, raw: Iterable[str]) -> list[Any]:
    """Turn command-line words into the arguments ``fmt`` asks for."""
    words = iter(raw)
    converted: list[Any] = []
    for token in _tokens(fmt):
        if not token.startswith("%") or token == "%%":
            continue
        conversion = token[1]
        word = next(words, None)
        if word is None:
            raise TypeError("not enough arguments for format string")
        if conversion in _INT_CONVERSIONS or conversion == "p":
            converted.append(int(word, 0))
        elif conversion == "c":
            if not word:
                raise TypeError("%c needs a character, got an empty argument")
            converted.append(word[0])
        else:
            converted.append(word)
    return converted


def main(argv: Optional[list[str]] = None) -> int:
    """Print a format given on the command line, or a short demonstration.

    With no arguments, prints ``10`` twice: once through :func:`printf` and
    once through the standard ``%`` operator, so the two can be compared.
    """
    words = sys.argv[1:] if argv is None else list(argv)
    if not words:
        printf("%d\n", 10)
        sys.stdout.write("%d\n" % 10)
        return 0
    fmt, *raw = words
    try:
        printf(fmt, *_cli_args(fmt, raw))
    except (TypeError, ValueError) as exc:
        print(f"printf: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())