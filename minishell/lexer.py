"""Splitting an input line into words and operator tokens."""

from __future__ import annotations

from minishell.errors import ErrorCode, UnclosedQuoteError
from minishell.search import strlen
from minishell.tokens import QuoteStatus, Token, TokenType, check_quote, get_separator

_NUL = "\0"
_TWO_CHAR = (TokenType.APPEND, TokenType.HEREDOC)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, ending with an empty END_OF_FILE token.

    Whitespace separates words and is not kept. Quoted text stays part of
    its word, quotes included. Raises UnclosedQuoteError when a quote is
    left open at the end of the text.
    """
    text = text[: strlen(text)]
    end = len(text)
    tokens: list[Token] = []
    status = QuoteStatus.COMPLETE
    start = 0
    index = 0
    while index <= end:
        status = check_quote(status, text[index] if index < end else _NUL)
        if status is QuoteStatus.COMPLETE:
            kind = get_separator(text, index)
            if kind is not TokenType.NONE:
                if index and get_separator(text, index - 1) is TokenType.NONE:
                    tokens.append(Token(text[start:index], TokenType.WORD))
                if kind > TokenType.WORD or kind is TokenType.END_OF_FILE:
                    width = 2 if kind in _TWO_CHAR else 1
                    tokens.append(Token(text[index : index + width], kind))
                    index += width - 1
                start = index + 1
        index += 1
    if status is QuoteStatus.SINGLE_QUOTE:
        raise UnclosedQuoteError(ErrorCode.UNCLOSED_SINGLE_QUOTE)
    if status is QuoteStatus.DOUBLE_QUOTE:
        raise UnclosedQuoteError(ErrorCode.UNCLOSED_DOUBLE_QUOTE)
    return tokens