"""The interactive shell: state, input parsing, signals and the prompt loop."""

from __future__ import annotations

import os
import signal
import sys
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from minishell.environment import Environment
from minishell.errors import ShellError, print_error
from minishell.lexer import tokenize
from minishell.output import put_char, put_endl
from minishell.tokens import Token

PROMPT = "minishell$ > "

_SIGQUIT = getattr(signal, "SIGQUIT", None)


class ShellExit(Exception):
    """The shell is to stop with the given exit status."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"exit {status}")


@dataclass
class ShellData:
    """State kept by the shell between input lines."""

    environment: Environment = field(default_factory=Environment)
    envp_array: list[str] = field(default_factory=list)
    last_exit_code: int = 0
    tokens: list[Token] = field(default_factory=list)

    @classmethod
    def from_environ(cls, envp: Iterable[str]) -> "ShellData":
        """Initialise from ``NAME=value`` strings."""
        environment = Environment.from_strings(envp)
        return cls(environment=environment, envp_array=environment.to_strings())


def parse_input(data: ShellData, line: Optional[str]) -> list[Token]:
    """Tokenize one input line and store the tokens in ``data``.

    A missing line (end of input) prints ``exit`` and raises ShellExit with
    the last exit code. An unclosed quote raises UnclosedQuoteError.
    """
    if line is None:
        put_endl("exit")
        raise ShellExit(data.last_exit_code)
    data.tokens = tokenize(line)
    return data.tokens


def _handle_input_sigint(signum: int, frame: Any) -> None:
    put_char("\n", sys.stdout)
    raise KeyboardInterrupt


def _handle_execution_signal(signum: int, frame: Any) -> None:
    if _SIGQUIT is not None and signum == _SIGQUIT:
        put_endl("Quit (core dumped)", sys.stderr)
    elif signum == signal.SIGINT:
        put_char("\n", sys.stdout)


def set_input_signals() -> None:
    """While reading input: ignore SIGQUIT, and let SIGINT start a fresh prompt."""
    if _SIGQUIT is not None:
        signal.signal(_SIGQUIT, signal.SIG_IGN)
    signal.signal(signal.SIGINT, _handle_input_sigint)


def set_execution_signals() -> None:
    """While running a command: report SIGINT and SIGQUIT without stopping."""
    signal.signal(signal.SIGINT, _handle_execution_signal)
    if _SIGQUIT is not None:
        signal.signal(_SIGQUIT, _handle_execution_signal)


def _signals() -> list[int]:
    return [signal.SIGINT] + ([_SIGQUIT] if _SIGQUIT is not None else [])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the prompt loop until end of input; return the exit status."""
    data = ShellData.from_environ(f"{key}={value}" for key, value in os.environ.items())
    saved = {signum: signal.getsignal(signum) for signum in _signals()}
    try:
        while True:
            set_input_signals()
            try:
                line: Optional[str] = input(PROMPT)
            except EOFError:
                line = None
            except KeyboardInterrupt:
                continue
            set_execution_signals()
            try:
                parse_input(data, line)
            except ShellExit as exc:
                return exc.status
            except ShellError as exc:
                print_error(exc.code)
                continue
            sys.stdout.write("nice")
            sys.stdout.flush()
    finally:
        for signum, handler in saved.items():
            if handler is not None:
                signal.signal(signum, handler)