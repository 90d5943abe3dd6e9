"""Command descriptor table for the CUE sheet grammar.

Each recognized command carries its parameter arity as data. The tables
are closed enums so the parser can map every member to exactly one
handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cuekit.exceptions import ArityError


@dataclass(frozen=True)
class Arity:
    """Parameter count rule: an exact count or a minimum, never both."""

    exact: int | None = None
    minimum: int | None = None

    def __post_init__(self) -> None:
        if (self.exact is None) == (self.minimum is None):
            raise ValueError("Arity needs exactly one of exact or minimum")

    @classmethod
    def exactly(cls, count: int) -> Arity:
        return cls(exact=count)

    @classmethod
    def at_least(cls, count: int) -> Arity:
        return cls(minimum=count)

    def check(self, count: int) -> None:
        """Raise ArityError if *count* parameters violate this rule."""
        if self.exact is not None and count != self.exact:
            raise ArityError(self.exact, count)
        if self.minimum is not None and count < self.minimum:
            raise ArityError(self.minimum, count, minimum=True)


class _CommandTable(Enum):
    """Shared behaviour of the descriptor enums.

    Member values are ``(name, arity)``; the name keeps members with equal
    arity from collapsing into aliases.
    """

    @property
    def arity(self) -> Arity:
        return self.value[1]

    @classmethod
    def lookup(cls, token: str):
        """Return the member named *token* (case-insensitive), or None."""
        return cls.__members__.get(token.upper())


class CueCommand(_CommandTable):
    """Top-level commands."""

    FILE = ("FILE", Arity.exactly(2))
    PERFORMER = ("PERFORMER", Arity.at_least(1))
    TITLE = ("TITLE", Arity.at_least(1))
    TRACK = ("TRACK", Arity.exactly(2))
    INDEX = ("INDEX", Arity.exactly(2))
    REM = ("REM", Arity.at_least(1))


class RemCommand(_CommandTable):
    """Recognized ``REM`` sub-commands; other comments are ignored."""

    GENRE = ("GENRE", Arity.at_least(1))
    DATE = ("DATE", Arity.at_least(1))
