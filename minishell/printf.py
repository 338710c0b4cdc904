"""Formatted output with a small set of conversions.

Supported conversions: ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. An unknown conversion produces no output and
consumes no argument. A lone ``%`` at the end of the format is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from minishell.search import strlen

_NULL_TEXT = "(null)"


def _wrap_signed(value: int, bits: int) -> int:
    low = -(2 ** (bits - 1))
    return (value - low) % 2**bits + low


def _wrap_unsigned(value: int, bits: int) -> int:
    return value % 2**bits


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert_str(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value[: strlen(value)]


def _convert_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p")
    return "0x" + f"{_wrap_unsigned(address, 64):x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _convert_char(_next_arg(args))
    if spec == "s":
        return _convert_str(_next_arg(args))
    if spec == "p":
        return _convert_pointer(_next_arg(args))
    if spec in ("d", "i"):
        return str(_wrap_signed(_as_int(_next_arg(args), spec), 32))
    if spec == "u":
        return str(_wrap_unsigned(_as_int(_next_arg(args), spec), 32))
    if spec == "x":
        return f"{_wrap_unsigned(_as_int(_next_arg(args), spec), 32):x}"
    if spec == "X":
        return f"{_wrap_unsigned(_as_int(_next_arg(args), spec), 32):X}"
    return ""


def format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the given arguments."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt[: strlen(fmt)])
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = format(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)