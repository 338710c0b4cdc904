"""Shell error codes, their messages and the exceptions that carry them."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, TextIO

from minishell.output import put_endl

MSG_UNCLOSED_SINGLE_QUOTE = "minishell: unexpected EOF while looking for matching '"
MSG_UNCLOSED_DOUBLE_QUOTE = 'minishell: unexpected EOF while looking for matching "'
MSG_MALLOC_ERROR = "malloc error"
MSG_UNKNOWN_ERROR = "unknown error"


class ErrorCode(IntEnum):
    """Result and error codes used throughout the shell."""

    SUCCESS = 0
    FAILURE = 1
    SYNTAX_ERROR = 2
    UNCLOSED_SINGLE_QUOTE = 3
    UNCLOSED_DOUBLE_QUOTE = 4
    QUOTE_ERROR = 5
    MALLOC_ERROR = 6
    CMD_NOT_EXECUTABLE = 126
    CMD_NOT_FOUND = 127


_MESSAGES = {
    ErrorCode.UNCLOSED_SINGLE_QUOTE: MSG_UNCLOSED_SINGLE_QUOTE,
    ErrorCode.UNCLOSED_DOUBLE_QUOTE: MSG_UNCLOSED_DOUBLE_QUOTE,
    ErrorCode.MALLOC_ERROR: MSG_MALLOC_ERROR,
}


def message_for(code: int) -> str:
    """The message reported for ``code``; codes without one give "unknown error"."""
    return _MESSAGES.get(code, MSG_UNKNOWN_ERROR)


def print_error(code: int, stream: Optional[TextIO] = None) -> None:
    """Write the message for ``code`` and a newline to ``stream`` (stderr by default)."""
    put_endl(message_for(code), sys.stderr if stream is None else stream)


class ShellError(Exception):
    """An error carrying a shell error code."""

    def __init__(self, code: int, message: Optional[str] = None) -> None:
        self.code = code
        super().__init__(message_for(code) if message is None else message)


class UnclosedQuoteError(ShellError):
    """Input ended while a single or double quote was still open."""

    _QUOTES = {
        ErrorCode.UNCLOSED_SINGLE_QUOTE: "'",
        ErrorCode.UNCLOSED_DOUBLE_QUOTE: '"',
    }

    def __init__(self, code: int) -> None:
        if code not in self._QUOTES:
            raise ValueError(f"not an unclosed-quote error code: {code!r}")
        super().__init__(ErrorCode(code))

    @property
    def quote(self) -> str:
        """The quote character left open."""
        return self._QUOTES[ErrorCode(self.code)]