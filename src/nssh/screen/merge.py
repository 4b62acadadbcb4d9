"""Regenerate the machine-list block of a GNU screen configuration.

Everything between the sentinel lines is rebuilt from named host lists; the
lines above and below are kept verbatim. Window numbers continue after the
highest ``screen ... N`` window found outside the block.
"""

from __future__ import annotations

import re
import shlex
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from nssh.core.types import ListEntry
from nssh.errors import ScreenConfigError
from nssh.lists.entries import ListStore

BEGIN_SENTINEL = "## BEGIN GENERATED CONFIG ##"
END_SENTINEL = "## END GENERATED CONFIG ##"
WINDOW_RE = re.compile(r"^screen.*\s(\d+)$")
PROFILE_KEYS = ". ~/.profile\\015"


@dataclass
class ScreenConfigParts:
    """A screen configuration split around its generated block."""

    top: list[str] = field(default_factory=list)
    bottom: list[str] = field(default_factory=list)
    highest_window: int = 0


@dataclass
class MergeState:
    """Bookkeeping threaded through block generation."""

    window: int
    seen: set[str] = field(default_factory=set)

    def take_window(self) -> int:
        number = self.window
        self.window += 1
        return number


@dataclass(frozen=True)
class ScreenCommands:
    host_command: str = "dstat -lrvn 60"
    list_command: str = "cl-netstat.pl --list {list}"


def split_config(lines: Iterable[str]) -> ScreenConfigParts:
    """Split config lines around the sentinels and find the highest window."""

    parts = ScreenConfigParts()
    in_block = False
    after_block = False
    for line in lines:
        if BEGIN_SENTINEL in line:
            in_block = True
            continue
        if END_SENTINEL in line:
            if not in_block:
                raise ScreenConfigError(f"{END_SENTINEL!r} without {BEGIN_SENTINEL!r}")
            in_block = False
            after_block = True
            continue
        if in_block:
            continue

        match = WINDOW_RE.match(line.rstrip("\r\n"))
        if match:
            parts.highest_window = max(parts.highest_window, int(match.group(1)))
        (parts.bottom if after_block else parts.top).append(line)

    if in_block:
        raise ScreenConfigError(f"{BEGIN_SENTINEL!r} without {END_SENTINEL!r}")
    return parts


def _window(title: str, number: int, keys: str) -> list[str]:
    return [f'screen -t "{title}" {number}', f'stuff "{keys}"']


def generate_list_block(
    list_name: str,
    entries: Sequence[ListEntry],
    state: MergeState,
    commands: ScreenCommands = ScreenCommands(),
) -> list[str]:
    """Windows for one list: filler up to a round number, a header, then hosts."""

    lines: list[str] = []
    while state.window % 10 != 0:
        lines.extend(_window("localhost", state.take_window(), PROFILE_KEYS))

    overview = commands.list_command.format(list=list_name)
    lines.extend(_window(f"CLUSTER: {list_name}", state.take_window(), f"{PROFILE_KEYS}{overview}"))

    for entry in entries:
        if entry.host in state.seen:
            continue
        state.seen.add(entry.host)
        login = f"nssh --comment {shlex.quote(entry.comment or '')} {entry.host}"
        keys = f"{PROFILE_KEYS}{login}\\015{commands.host_command}\\015"
        lines.extend(_window(entry.host, state.take_window(), keys))
    return lines


def _terminated(line: str, newline: str) -> str:
    return line if line.endswith(("\n", "\r")) else f"{line}{newline}"


def render_config(parts: ScreenConfigParts, generated: Sequence[str], newline: str = "\n") -> str:
    """Join the parts back together; preserved lines keep their own endings."""
    block = [BEGIN_SENTINEL, *generated, END_SENTINEL]
    lines = [*parts.top, *block, *parts.bottom]
    return "".join(_terminated(line, newline) for line in lines)


def _read_raw(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def merge_screen_config(
    path: Path,
    list_names: Sequence[str],
    lists: ListStore,
    *,
    list_prefix: str = "machines.",
    window_gap: int = 10,
    commands: ScreenCommands = ScreenCommands(),
) -> MergeState:
    """Rewrite ``path`` with a freshly generated block for ``list_names``."""

    try:
        text = _read_raw(path) if path.exists() else ""
    except (OSError, UnicodeDecodeError) as exc:
        raise ScreenConfigError(f"cannot read {path}: {exc}") from exc
    newline = "\r\n" if "\r\n" in text else "\n"
    parts = split_config(text.splitlines(keepends=True))
    state = MergeState(window=parts.highest_window + window_gap)

    generated: list[str] = []
    for name in list_names:
        entries = lists.read(f"{list_prefix}{name}")
        generated.extend(generate_list_block(name, entries, state, commands))
        logger.info("screenrc.list name={} hosts={} next_window={}", name, len(entries), state.window)

    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(render_config(parts, generated, newline))
    except OSError as exc:
        raise ScreenConfigError(f"cannot write {path}: {exc}") from exc
    return state
