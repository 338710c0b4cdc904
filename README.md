# minishell

A small interactive shell front end. It reads command lines at a
`minishell$ > ` prompt and splits them into tokens with a quote-aware lexer.
It reports unclosed single or double quotes the way a POSIX shell does. The
package also holds a set of character, string, byte-buffer and formatted-output
helpers that the shell is built on.

## Installing

```
pip install .
```

## Running

```
minishell
```

Type a command line at the prompt. When the line tokenizes cleanly the shell
writes `nice`, with no newline after it. An unclosed quote writes one of
these messages to standard error:

```
minishell: unexpected EOF while looking for matching '
minishell: unexpected EOF while looking for matching "
```

Press Ctrl-D to leave the shell. It prints `exit` and returns the last exit
status, which stays 0 because no commands are run. Ctrl-C at the prompt gives
you a fresh prompt. Ctrl-\ is ignored while you are typing. The previous
SIGINT and SIGQUIT handlers are restored when the loop ends.

## What it does not do

The shell only reads and tokenizes lines. It does not run commands, set up
pipes or redirections, expand variables or strip quotes, and it has no
built-in commands. The tokens from the most recent line are kept in
`ShellData.tokens` (`minishell.shell`), and nothing else uses them.

## Using the lexer

```python
from minishell.lexer import tokenize

for token in tokenize("cat < in.txt | grep 'a b' >> out.txt"):
    print(token.type.name, repr(token.value))
```

`tokenize` returns a list of `minishell.tokens.Token` objects. Each one has a
`value` and a `type`, and the type is a `TokenType`: `WORD`, `PIPE`,
`REDIRECT_IN` (`<`), `HEREDOC` (`<<`), `REDIRECT_OUT` (`>`) or `APPEND` (`>>`).
The list always ends with an `END_OF_FILE` token whose value is empty.
Whitespace separates words and is dropped. Quoted text, quotes included,
stays part of its word. An unclosed quote raises
`minishell.errors.UnclosedQuoteError`. Its `code` is an `ErrorCode` and its
`quote` property gives the quote character that was left open.

`minishell.tokens` also has `check_quote` and `get_separator`, the steps the
lexer is built from. It also has `format_tokens`, which renders a list of
tokens as `Tokens: [a] [b] `.

`minishell.shell.parse_input(data, line)` tokenizes a line and stores the
result in a `ShellData`. If `line` is `None` it prints `exit` and raises
`ShellExit`.

## Environment

`minishell.environment.Environment.from_strings` builds an ordered
environment from `NAME=value` strings. Each entry is split on `=` with empty
pieces dropped. The first piece is the name and the second is the value. Any
further pieces are discarded. `append(name, value)` adds a variable at the
end. `to_strings()` returns the variables as `NAME=value` strings.
`ShellData.from_environ` uses both.

## Utility modules

- `minishell.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`), `to_upper`, `to_lower`,
  `atoi` (wraps like a 32-bit int) and `itoa`.
- `minishell.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. They
  write to a stream, standard output by default.
- `minishell.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc` on `bytearray`/`memoryview` buffers.
- `minishell.search`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy` and `strlcat`. Strings end at their first NUL, and positions come
  back as indices.
- `minishell.strings`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`.
- `minishell.printf`: `format(fmt, *args)` and
  `printf(fmt, *args, stream=None)`. They support `%c %s %p %d %i %u %x %X %%`.
- `minishell.errors`: `ErrorCode`, `message_for`, `print_error`, `ShellError`
  and `UnclosedQuoteError`.

## Running the tests

```
pip install .[test]
pytest
```