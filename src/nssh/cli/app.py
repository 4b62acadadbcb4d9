"""nssh command-line entry points."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError

from nssh.config import Settings, load_settings
from nssh.core.classifier import classify
from nssh.core.types import ClassifiedArgs
from nssh.errors import ConfigurationError, NsshError
from nssh.launch import build_command, handoff, resolve_real_name, screen_title
from nssh.lists.cursor import CursorStore
from nssh.lists.entries import ListStore
from nssh.lists.walker import ListWalker
from nssh.logging_utils import configure_logging
from nssh.screen.merge import ScreenCommands, merge_screen_config

app = typer.Typer(
    name="nssh",
    help="ssh to a named host or step through a dsh machine list.",
    add_completion=False,
)
screenrc_app = typer.Typer(
    name="nssh-screenrc",
    help="Regenerate the machine-list windows of a GNU screen configuration.",
    add_completion=False,
)


def _prepare() -> Settings:
    try:
        settings = load_settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid NSSH_* setting: {exc}") from exc
    profile = "rich" if settings.log_profile == "rich" else "default"
    configure_logging(profile=profile, level=settings.log_level)
    return settings


def _fail(exc: NsshError) -> typer.Exit:
    logger.debug("nssh.error type={} message={}", type(exc).__name__, exc)
    typer.echo(f"nssh: error: {exc}", err=True)
    return typer.Exit(exc.exit_code)


def build_walker(settings: Settings) -> ListWalker:
    return ListWalker(
        ListStore(Path(settings.dsh_dir)),
        CursorStore(Path(settings.last_file)),
        skip_disabled=settings.skip_disabled,
    )


def run(classified: ClassifiedArgs, settings: Settings) -> int:
    """Dispatch one classified command line and return the exit status."""

    walker = build_walker(settings)
    if classified.is_reset:
        walker.reset(classified.list_name)
        return 0

    hostname = classified.target or ""
    comment = classified.comment
    from_list = classified.is_next
    if from_list:
        entry = walker.resolve_next(classified.list_name or settings.default_list)
        hostname, comment = entry.host, entry.comment

    real_name = resolve_real_name(hostname) if settings.resolve_names else hostname
    if from_list:
        walker.save(hostname)

    typer.echo(screen_title(hostname, comment))
    command = build_command(settings.ssh_program, classified.ssh_args, real_name)
    return handoff(command, env_name=settings.hostname_env, display_name=hostname)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    help="nssh [ssh options] [--list NAME] [--comment TEXT] [--user NAME] (hostname | user@host | next | reset)",
)
def main(ctx: typer.Context) -> None:
    try:
        settings = _prepare()
        classified = classify(ctx.args, list_prefix=settings.list_prefix)
        code = run(classified, settings)
    except NsshError as exc:
        raise _fail(exc) from exc
    raise typer.Exit(code)


@screenrc_app.command()
def generate(
    screenrc: Path | None = typer.Option(None, "--screenrc", "-f", help="Screen configuration to rewrite"),  # noqa: B008
    lists: list[str] | None = typer.Option(None, "--list", "-l", help="List name; repeat for several"),  # noqa: B008
) -> None:
    """Rebuild the generated block of the screen configuration."""

    try:
        settings = _prepare()
    except NsshError as exc:
        raise _fail(exc) from exc
    names = lists or settings.screen_lists
    if not names:
        typer.echo("nssh: error: no lists given (use --list or NSSH_SCREEN_LISTS)", err=True)
        raise typer.Exit(2)

    target = screenrc or Path(settings.screenrc)
    commands = ScreenCommands(host_command=settings.screen_host_command, list_command=settings.screen_list_command)
    try:
        state = merge_screen_config(
            target,
            names,
            ListStore(Path(settings.dsh_dir)),
            list_prefix=settings.list_prefix,
            window_gap=settings.screen_window_gap,
            commands=commands,
        )
    except NsshError as exc:
        raise _fail(exc) from exc
    typer.echo(f"{target}: {len(state.seen)} hosts, next window {state.window}")


def main_entry() -> None:
    app()


def screenrc_entry() -> None:
    screenrc_app()
