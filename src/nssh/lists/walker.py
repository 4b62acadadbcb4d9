"""Cursor-driven walk over a named host list."""

from __future__ import annotations

from loguru import logger

from nssh.core.types import ListEntry
from nssh.errors import EmptyListError, EndOfListError, StaleCursorError
from nssh.lists.cursor import CursorStore
from nssh.lists.entries import ListStore


class ListWalker:
    """Step through a named list one host per invocation.

    Disabled entries stay selectable unless ``skip_disabled`` is set.
    """

    def __init__(self, lists: ListStore, cursor: CursorStore, *, skip_disabled: bool = False) -> None:
        self.lists = lists
        self.cursor = cursor
        self.skip_disabled = skip_disabled

    def _eligible(self, entry: ListEntry) -> bool:
        return not (self.skip_disabled and entry.disabled)

    def resolve_next(self, list_name: str) -> ListEntry:
        """Return the entry after the cursor without persisting it."""

        entries = self.lists.read(list_name)
        last = self.cursor.read()

        if last is None:
            for entry in entries:
                if self._eligible(entry):
                    logger.info("walker.first list={} host={}", list_name, entry.host)
                    return entry
            raise EmptyListError(f"{self.lists.path_for(list_name)} has no hosts")

        for index, entry in enumerate(entries):
            if entry.host != last:
                continue
            for candidate in entries[index + 1 :]:
                if self._eligible(candidate):
                    logger.info("walker.next list={} last={} host={}", list_name, last, candidate.host)
                    return candidate
            raise EndOfListError(f"Reached end of {self.lists.path_for(list_name)}. There is no next host!")

        raise StaleCursorError(
            f"last host {last!r} is not in {self.lists.path_for(list_name)}; run 'nssh reset' to start over"
        )

    def save(self, host: str) -> None:
        self.cursor.save(host)

    def reset(self, list_name: str | None = None) -> None:
        """Forget the cursor. The cursor is shared by all lists."""
        logger.info("walker.reset list={}", list_name)
        self.cursor.reset()
