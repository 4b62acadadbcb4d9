"""dsh-style machine list parsing.

One host per line, optionally followed by ``# comment``::

    web1.example.com   # frontend
    #web2.example.com  # under repair
    # plain comment lines and blank lines are ignored

A ``#`` directly in front of the host marks the entry disabled. A literal ``#``
inside a host or comment can be written as ``\\#``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from nssh.core.types import ListEntry
from nssh.errors import ListNotFoundError, ListReadError

DISABLED_MARKER = "#"
DISABLED_TAG = "[DOWN]"
_COMMENT_SPLIT_RE = re.compile(r"(?<!\\)#")


def _unescape(text: str) -> str:
    return text.replace("\\#", "#")


def parse_entry(line: str) -> ListEntry | None:
    """Parse one list line, returning ``None`` for lines without a host."""

    body = line.strip()
    disabled = False
    if body.startswith(DISABLED_MARKER):
        body = body[len(DISABLED_MARKER) :]
        if not body or body[0].isspace():
            return None
        disabled = True

    parts = _COMMENT_SPLIT_RE.split(body, maxsplit=1)
    words = parts[0].split()
    if not words:
        return None
    host = _unescape(words[0])

    comment: str | None = None
    if len(parts) > 1:
        comment = _unescape(parts[1].strip()) or None

    if disabled:
        comment = f"{DISABLED_TAG} {comment}" if comment else DISABLED_TAG
    return ListEntry(host=host, comment=comment, disabled=disabled)


def parse_entries(lines: Iterable[str]) -> list[ListEntry]:
    """Parse list lines in order, dropping blank and comment-only lines."""

    entries: list[ListEntry] = []
    for line in lines:
        entry = parse_entry(line)
        if entry is not None:
            entries.append(entry)
    return entries


class ListStore:
    """Read-only view of a directory of named host lists."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, list_name: str) -> Path:
        return self.root / list_name

    def read(self, list_name: str) -> list[ListEntry]:
        path = self.path_for(list_name)
        if not path.is_file():
            raise ListNotFoundError(list_name, path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return parse_entries(handle)
        except (OSError, UnicodeDecodeError) as exc:
            raise ListReadError(f"cannot read {path}: {exc}") from exc
