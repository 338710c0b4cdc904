"""Token kinds, quote tracking and separator recognition for the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from minishell.chars import is_space

_NUL = "\0"


class TokenType(IntEnum):
    """Kinds of lexical token."""

    END_OF_FILE = -1
    NONE = 0
    SPACES = 1
    WORD = 2
    VARIABLE = 3
    PIPE = 4
    REDIRECT_IN = 5
    HEREDOC = 6
    REDIRECT_OUT = 7
    APPEND = 8


class QuoteStatus(IntEnum):
    """Whether the lexer is currently inside quotes."""

    COMPLETE = 0
    SINGLE_QUOTE = 1
    DOUBLE_QUOTE = 2


@dataclass
class Token:
    """A piece of input text and its kind."""

    value: str
    type: TokenType


def check_quote(status: int, char: str) -> QuoteStatus:
    """The quote status after reading ``char`` in state ``status``."""
    status = QuoteStatus(status)
    if char == "'":
        if status is QuoteStatus.COMPLETE:
            return QuoteStatus.SINGLE_QUOTE
        if status is QuoteStatus.SINGLE_QUOTE:
            return QuoteStatus.COMPLETE
    elif char == '"':
        if status is QuoteStatus.COMPLETE:
            return QuoteStatus.DOUBLE_QUOTE
        if status is QuoteStatus.DOUBLE_QUOTE:
            return QuoteStatus.COMPLETE
    return status


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else _NUL


def get_separator(text: str, index: int) -> TokenType:
    """Classify the separator starting at ``index``; the end of text is END_OF_FILE."""
    if not 0 <= index <= len(text):
        raise IndexError(f"index {index} outside text of length {len(text)}")
    char = _char_at(text, index)
    following = _char_at(text, index + 1)
    if is_space(char):
        return TokenType.SPACES
    if char == "|":
        return TokenType.PIPE
    if char == "<":
        return TokenType.HEREDOC if following == "<" else TokenType.REDIRECT_IN
    if char == ">":
        return TokenType.APPEND if following == ">" else TokenType.REDIRECT_OUT
    if char == _NUL:
        return TokenType.END_OF_FILE
    return TokenType.NONE


def format_tokens(tokens: Iterable[Token]) -> str:
    """A one-line listing of token values, each in brackets."""
    return "Tokens: " + "".join(f"[{token.value}] " for token in tokens)