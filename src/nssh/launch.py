"""Name resolution and handoff to the remote-login program."""

from __future__ import annotations

import os
import shutil
import socket
import subprocess
from collections.abc import Mapping, Sequence

from loguru import logger

from nssh.errors import LaunchError, ResolutionError


def resolve_real_name(hostname: str) -> str:
    """Resolve a name to an address and back to that address's canonical name.

    This turns a CNAME into the name the target knows itself by, so that
    ``~/.ssh/config`` entries keyed on the real name still match.
    """

    try:
        address = socket.gethostbyname(hostname)
    except OSError as exc:
        raise ResolutionError(f"cannot resolve {hostname!r}: {exc}") from exc
    try:
        real_name, _aliases, _addresses = socket.gethostbyaddr(address)
    except OSError as exc:
        raise ResolutionError(f"no reverse name for {hostname!r} ({address}): {exc}") from exc
    logger.info("resolve hostname={} address={} real_name={}", hostname, address, real_name)
    return real_name


def screen_title(hostname: str, comment: str | None = None) -> str:
    """GNU screen escape sequence naming the current window."""

    if comment:
        return f"\033k{hostname} [{comment}]\033\\"
    return f"\033k{hostname}\033\\"


def build_command(program: str, ssh_args: Sequence[str], real_name: str) -> list[str]:
    return [program, *ssh_args, real_name]


def handoff(command: Sequence[str], *, env_name: str, display_name: str, environ: Mapping[str, str] | None = None) -> int:
    """Run the remote-login program and return its exit status.

    The child inherits stdio and gets ``env_name`` set to the display hostname.
    Arguments are passed as a vector, never through a shell.
    """

    env = dict(os.environ if environ is None else environ)
    env[env_name] = display_name
    program = shutil.which(command[0]) or command[0]
    logger.info("handoff command={}", list(command))
    try:
        # The command is a literal argv vector built from classified tokens.
        completed = subprocess.run([program, *command[1:]], env=env, check=False)  # noqa: S603
    except OSError as exc:
        raise LaunchError(f"cannot run {command[0]}: {exc}") from exc
    return completed.returncode
