"""Allocation-style string helpers: duplicate, slice, join, trim, split and map.

Strings are treated as terminated at their first NUL character, if any.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

from minishell.search import strlen

_NUL = "\0"


def _body(text: str) -> str:
    return text[: strlen(text)]


def _check_char(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


def strdup(text: Optional[str]) -> str:
    """Return a copy of ``text``; None gives the empty string."""
    if text is None:
        return ""
    return _body(text)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives the empty string. None gives None.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _body(text)
    if start >= len(body):
        return ""
    return body[start : start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is None."""
    if a is None or b is None:
        return None
    return _body(a) + _body(b)


def strtrim(text: Optional[str], chars: Optional[str]) -> Optional[str]:
    """Strip characters found in ``chars`` from both ends of ``text``.

    None for either argument gives None.
    """
    if text is None or chars is None:
        return None
    return _body(text).strip(_body(chars))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _check_char(sep)
    body = _body(text)
    if sep == _NUL:
        return [body] if body else []
    return [word for word in body.split(sep) if word]


def strmapi(
    text: Optional[str], func: Callable[[int, str], str]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for each character.

    The result ends at the first NUL that ``func`` produces. None gives None.
    """
    if text is None:
        return None
    mapped = "".join(
        _check_char(func(index, char)) for index, char in enumerate(_body(text))
    )
    return _body(mapped)


def striteri(
    text: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` on each character of a mutable character list.

    A returned character replaces the one at that index in place; None keeps it.
    Iteration stops at a NUL element. Nothing happens if either argument is
    missing or the sequence is empty.
    """
    if not text or func is None:
        return
    for index in range(len(text)):
        current = text[index]
        if current == _NUL:
            break
        replacement = func(index, current)
        if replacement is not None:
            text[index] = _check_char(replacement)