"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return code == ord(" ") or 9 <= code <= 13


def _convert_case(c: Char, low: str, high: str, shift: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "A", "Z", 32)


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0. The result
    wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)