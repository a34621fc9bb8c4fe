"""printf-style formatting with the kernel's limited set of conversions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

_MASK32 = (1 << 32) - 1
_DIGITS = "0123456789"
_BASE_SPEC = {2: "b", 8: "o", 10: "d", 16: "x"}


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _format_number(
    value: int, base: int, negative: bool, width: int, ladjust: bool, padc: str, upcase: bool
) -> str:
    digits = format(value, _BASE_SPEC[base])
    if upcase:
        digits = digits.upper()
    if ladjust:
        return (("-" if negative else "") + digits).ljust(width)
    if negative and padc == "0":
        length = max(width, len(digits) + 1)
        return "-" + digits.rjust(length - 1, "0")
    return (("-" if negative else "") + digits).rjust(width, padc)


def _to_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def vprintfmt(out: Callable[[str], Any], fmt: str, args: Iterable[Any]) -> None:
    """Format ``fmt`` with ``args``, passing each produced piece of text to ``out``."""
    values = iter(args)
    fmt = fmt.split("\0", 1)[0]
    end = len(fmt)
    pos = 0

    def emit(text: str) -> None:
        if text:
            out(text)

    while True:
        pct = fmt.find("%", pos)
        if pct < 0:
            emit(fmt[pos:])
            return
        emit(fmt[pos:pct])
        i = pct + 1

        ladjust = False
        padc = " "
        if i < end and fmt[i] == "-":
            ladjust = True
            i += 1
        elif i < end and fmt[i] == "0":
            padc = "0"
            i += 1

        width = 0
        while i < end and fmt[i] in _DIGITS:
            width = width * 10 + int(fmt[i])
            i += 1

        if i < end and fmt[i] == "l":
            i += 1

        if i >= end:
            return
        conv = fmt[i]
        pos = i + 1

        if conv in "bdDoOuUxX":
            raw = int(_next_arg(values)) & _MASK32
            negative = False
            if conv in "dD":
                if raw & 0x80000000:
                    negative = True
                    raw = (1 << 32) - raw
                emit(_format_number(raw, 10, negative, width, ladjust, padc, False))
            else:
                base = {"b": 2, "o": 8, "O": 8, "u": 10, "U": 10, "x": 16, "X": 16}[conv]
                emit(_format_number(raw, base, False, width, ladjust, padc, conv == "X"))
        elif conv == "c":
            ch = _to_char(_next_arg(values))
            emit(ch.ljust(width) if ladjust else ch.rjust(width))
        elif conv == "s":
            text = _next_arg(values)
            if not isinstance(text, str):
                raise TypeError("%s requires a string")
            text = text.split("\0", 1)[0]
            emit(text.ljust(width) if ladjust else text.rjust(width))
        else:
            emit(conv)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` formatted with ``args`` as a single string."""
    pieces: list[str] = []
    vprintfmt(pieces.append, fmt, args)
    return "".join(pieces)