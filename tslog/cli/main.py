"""Click commands for tslog.

Every command is a strict read-(transform)-write sequence against the
record store.  NotFoundError and ValidationError end a command with a plain
message and exit status 0; FormatError and StoreIOError are fatal (status 1).
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from tslog import __version__
from tslog.config import load_config
from tslog.errors import FormatError, NotFoundError, StoreIOError, ValidationError
from tslog.filters import keep_matching, name_exists, remove_matching, unique_names
from tslog.models.config import TsConfig
from tslog.models.records import DEFAULT_NAME, DisplayConfig, Record
from tslog.observability.logging import get_logger, setup_logging
from tslog.report import NO_RECORDS_MESSAGE, render_report
from tslog.store import RecordStore
from tslog.temporal import TimezoneSettings, format_timestamp, now_utc, to_display_zone

_SERIES_RULE = "-" * 19
_CONFIRM_ANSWERS = ("y", "yes")


@dataclass
class _Session:
    """Per-invocation handles built from the loaded configuration."""

    config: TsConfig
    store: RecordStore
    timezone: TimezoneSettings

    @classmethod
    def from_config(cls, config: TsConfig) -> _Session:
        home = Path(config.storage.home)
        return cls(
            config=config,
            store=RecordStore(home / config.storage.records_filename),
            timezone=TimezoneSettings(home / config.storage.timezone_filename),
        )


def _handle_errors(fn: Callable[..., None]) -> Callable[..., None]:
    """Turn tslog errors into user messages and exit codes."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            fn(*args, **kwargs)
        except (NotFoundError, ValidationError) as exc:
            click.echo(str(exc))
        except (FormatError, StoreIOError) as exc:
            get_logger("cli").error("command failed", command=fn.__name__, error=str(exc))
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(1) from exc

    return wrapper


def _confirm(prompt: str) -> bool:
    try:
        answer = click.prompt(prompt, default="", show_default=False, prompt_suffix=" ")
    except click.Abort:
        return False
    return answer.strip().lower() in _CONFIRM_ANSWERS


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Stopwatch timestamps: add named timestamps and show the time between them."""
    try:
        config = load_config()
    except StoreIOError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(config.log.level)
    ctx.obj = _Session.from_config(config)


@cli.command()
@click.argument("name", default=DEFAULT_NAME)
@click.pass_obj
@_handle_errors
def add(session: _Session, name: str) -> None:
    """Add a timestamp to the default stopwatch or a named one."""
    record = Record(name=name, timestamp=now_utc())
    shown = to_display_zone(record.timestamp, session.timezone.read())
    session.store.append(record)
    click.echo("Timestamp added")
    click.echo(f"{name}: {format_timestamp(shown)}")


@cli.command()
@click.argument("names", nargs=-1)
@click.option("-split", "--split", "split", is_flag=True, help="Print one table per stopwatch.")
@click.option("-exact", "--exact", "exact", is_flag=True, help="Match names exactly instead of by substring.")
@click.option("-diff-prev", "--diff-prev", "diff_prev", is_flag=True, help='Show the "Since prev" column.')
@click.option("-diff-first", "--diff-first", "diff_first", is_flag=True, help='Show the "Since first" column.')
@click.option("-diff-now", "--diff-now", "diff_now", is_flag=True, help='Show the "Since now" column.')
@click.pass_obj
@_handle_errors
def show(
    session: _Session,
    names: tuple[str, ...],
    split: bool,
    exact: bool,
    diff_prev: bool,
    diff_first: bool,
    diff_now: bool,
) -> None:
    """Show timestamps, optionally only for stopwatches matching NAMES."""
    records = keep_matching(session.store.load_all(), names, exact)
    if not records:
        click.echo(NO_RECORDS_MESSAGE)
        return

    display = DisplayConfig(show_prev_diff=diff_prev, show_first_diff=diff_first, show_now_diff=diff_now)
    zone = session.timezone.read()
    now = now_utc()

    if not split:
        _echo_lines(render_report(records, display, now, zone))
        return

    for name in unique_names(records):
        click.echo(name)
        click.echo(_SERIES_RULE)
        series = keep_matching(records, [name], exact=True)
        _echo_lines(render_report(series, display, now, zone, show_names=False))
        click.echo()


@cli.command()
@click.argument("name", default=DEFAULT_NAME)
@click.option("-all", "--all", "all_", is_flag=True, help="Reset every stopwatch.")
@click.pass_obj
@_handle_errors
def reset(session: _Session, name: str, all_: bool) -> None:
    """Reset the default stopwatch or a named one."""
    log = get_logger("cli")
    if all_:
        if not session.store.exists():
            raise NotFoundError(NO_RECORDS_MESSAGE)
        if not _confirm("Reset all? (y/n)"):
            click.echo("Aborted")
            return
        session.store.delete()
        log.info("store reset")
        click.echo("Done")
        return

    records = session.store.load_all()
    if not name_exists(records, name):
        raise NotFoundError("This stopwatch is not running")
    if not _confirm(f"Reset {name}? (y/n)"):
        click.echo("Aborted")
        return

    remaining = remove_matching(records, [name], exact=True)
    if remaining:
        session.store.rewrite_all(remaining)
    else:
        session.store.delete()
    log.info("stopwatch reset", name=name, removed=len(records) - len(remaining))
    click.echo("Done")


@cli.command()
@click.argument("old")
@click.argument("new")
@click.pass_obj
@_handle_errors
def rename(session: _Session, old: str, new: str) -> None:
    """Rename a stopwatch."""
    records = session.store.load_all()
    if not name_exists(records, old):
        raise ValidationError("This stopwatch does not exist")
    if name_exists(records, new):
        raise ValidationError("This stopwatch already exists")

    renamed = [Record(name=new, timestamp=r.timestamp) if r.name == old else r for r in records]
    session.store.rewrite_all(renamed)
    get_logger("cli").info("stopwatch renamed", old=old, new=new)
    click.echo("Done")


@cli.command(name="list")
@click.pass_obj
@_handle_errors
def list_(session: _Session) -> None:
    """List stopwatches."""
    for name in unique_names(session.store.load_all()):
        click.echo(name)


@cli.command()
@click.pass_obj
@_handle_errors
def edit(session: _Session) -> None:
    """Edit the timestamp file with $EDITOR. Timestamps are stored in UTC."""
    if not session.store.exists():
        raise NotFoundError(NO_RECORDS_MESSAGE)
    click.edit(filename=str(session.store.path), editor=session.config.editor or None)
    # Re-read so a malformed edit is reported now rather than on the next show.
    session.store.load_all()


@cli.command()
@click.argument("zone", required=False)
@click.option("-reset", "--reset", "reset_", is_flag=True, help="Forget the timezone and use local time.")
@click.pass_obj
@_handle_errors
def timezone(session: _Session, zone: str | None, reset_: bool) -> None:
    """Set the display timezone, e.g. "America/New_York"."""
    if reset_:
        session.timezone.clear()
        click.echo("Timezone reset, using local time")
        return
    if not zone:
        raise ValidationError("Missing timezone name")
    session.timezone.write(zone)
    click.echo(f"Timezone set to {zone.strip()}")


@cli.command()
def version() -> None:
    """Print version."""
    click.echo(__version__)
