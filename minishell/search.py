"""String length, searching, comparison and bounded copying.

Strings are treated as terminated at their first NUL character, if any.
"""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def _terminated(text: str) -> str:
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def strlen(text: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(text))


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char``; searching for NUL gives the length."""
    _check_char(char)
    body = _terminated(text)
    if char == _NUL:
        return len(body)
    index = body.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char``; searching for NUL gives the length."""
    _check_char(char)
    body = _terminated(text)
    if char == _NUL:
        return len(body)
    index = body.rfind(char)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    left = _terminated(a)
    right = _terminated(b)
    for position in range(n):
        ca = left[position] if position < len(left) else _NUL
        cb = right[position] if position < len(right) else _NUL
        if ca != cb or ca == _NUL:
            return ord(ca) - ord(cb)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    target = _terminated(needle)
    if not target:
        return 0
    if length <= 0:
        return None
    index = _terminated(haystack)[:length].find(target)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``; a result shorter than that length means truncation.
    """
    body = _terminated(src)
    if size <= 0:
        return "", len(body)
    return body[: size - 1], len(body)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have, counting ``dst`` as at most ``size`` characters.
    """
    head = _terminated(dst)
    tail = _terminated(src)
    dst_len = min(len(head), max(size, 0))
    total = dst_len + len(tail)
    if dst_len == size:
        return head, total
    room = size - 1 - dst_len
    return head + tail[:room], total