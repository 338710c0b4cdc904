"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from minishell.chars import itoa


def _resolve(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _resolve(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; None writes nothing."""
    if text is None:
        return
    _resolve(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if text is None:
        return
    _resolve(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _resolve(stream).write(itoa(n))