"""Persisted cursor for ``nssh next``."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from nssh.errors import CursorFileError


class CursorStore:
    """Single-file store holding the last host returned by ``next``.

    The file holds the host name followed by a newline. A missing file means the
    walk starts at the top of the list.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CursorFileError(f"cannot read cursor file {self.path}: {exc}") from exc

        lines = text.splitlines()
        host = lines[0].strip() if lines else ""
        if not host or any(line.strip() for line in lines[1:]):
            raise CursorFileError(f"malformed cursor file {self.path}; run 'nssh reset' to clear it")
        return host

    def save(self, host: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{host}\n", encoding="utf-8")
        except OSError as exc:
            raise CursorFileError(f"cannot write cursor file {self.path}: {exc}") from exc
        logger.debug("cursor.save path={} host={}", self.path, host)

    def reset(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise CursorFileError(f"cannot remove cursor file {self.path}: {exc}") from exc
        logger.debug("cursor.reset path={}", self.path)
