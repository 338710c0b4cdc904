"""The shell's own copy of the process environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from minishell.strings import split, strdup


@dataclass
class EnvVar:
    """One environment variable."""

    name: str
    value: str


@dataclass
class Environment:
    """An ordered collection of environment variables."""

    variables: list[EnvVar] = field(default_factory=list)

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=value`` strings.

        Each entry is split on ``=`` with empty pieces dropped: the first
        piece is the name and the second the value. Anything after a further
        ``=`` is discarded, and a missing piece becomes the empty string.
        """
        env = cls()
        for entry in entries:
            pieces = split(entry, "=")
            name = pieces[0] if pieces else None
            value = pieces[1] if len(pieces) > 1 else None
            env.append(name, value)
        return env

    def append(self, name: Optional[str], value: Optional[str]) -> EnvVar:
        """Add a variable at the end; a missing name or value becomes empty."""
        variable = EnvVar(strdup(name), strdup(value))
        self.variables.append(variable)
        return variable

    def to_strings(self) -> list[str]:
        """The variables as ``NAME=value`` strings, in order."""
        return [f"{variable.name}={variable.value}" for variable in self.variables]

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self.variables)

    def __len__(self) -> int:
        return len(self.variables)