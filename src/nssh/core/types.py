"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TokenKind = Literal["flag", "flag_value", "directive", "user_host", "positional"]

NEXT = "next"
RESET = "reset"


@dataclass(frozen=True)
class Token:
    """One classified command-line token, with its consumed value if any."""

    kind: TokenKind
    raw: str
    value: str | None = None

    def words(self) -> list[str]:
        """Raw words this token consumed, in command-line order."""
        if self.value is None:
            return [self.raw]
        return [self.raw, self.value]


@dataclass(frozen=True)
class ClassifiedArgs:
    """Command line split between ssh pass-through words and nssh directives."""

    ssh_args: tuple[str, ...] = ()
    list_name: str | None = None
    comment: str | None = None
    user: str | None = None
    target: str | None = None

    @property
    def is_next(self) -> bool:
        return self.target == NEXT

    @property
    def is_reset(self) -> bool:
        return self.target == RESET


@dataclass(frozen=True)
class ListEntry:
    """One host line of a named list."""

    host: str
    comment: str | None = None
    disabled: bool = False
