"""CLI entry point for weekly-moment arithmetic."""

from __future__ import annotations

import datetime as _dt

import click

from .core.config import Settings, load_settings
from .core.enums import ChronoUnit, DayOfWeek
from .core.errors import WeekTimeError
from .core.time_of_day import TimeOfDay
from .moment import WeeklyMoment
from .observability.logger import setup_logging

_UNIT_CHOICE = click.Choice([u.value for u in ChronoUnit], case_sensitive=False)

# Lets negative amounts such as "-5" through as arguments.
_ARITHMETIC_CONTEXT = {"ignore_unknown_options": True}


def _moment(day: str, time: str) -> WeeklyMoment:
    try:
        day_of_week = DayOfWeek.from_name(day)
    except WeekTimeError as exc:
        raise click.BadParameter(str(exc), param_hint="DAY") from exc
    try:
        time_of_day = TimeOfDay.from_time(_dt.time.fromisoformat(time))
    except ValueError as exc:
        raise click.BadParameter(f"Invalid time {time!r}: {exc}", param_hint="TIME") from exc
    return WeeklyMoment.of(day_of_week, time_of_day)


def _unit(settings: Settings, unit: str | None) -> ChronoUnit:
    return ChronoUnit(unit.lower()) if unit else settings.cli.default_unit


@click.group()
@click.option("--config", default=None, help="TOML config file path")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """Weekly moment arithmetic (day of week + time of day)."""
    try:
        settings = load_settings(config_path=config)
    except WeekTimeError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(settings.observability.log_level, settings.observability.log_format)
    ctx.obj = settings


@main.command(context_settings=_ARITHMETIC_CONTEXT)
@click.argument("day")
@click.argument("time")
@click.argument("amount", type=int)
@click.option("--unit", type=_UNIT_CHOICE, default=None, help="Unit of AMOUNT")
@click.pass_obj
def plus(settings: Settings, day: str, time: str, amount: int, unit: str | None) -> None:
    """Add AMOUNT units to DAY@TIME."""
    start = _moment(day, time)
    try:
        click.echo(start.plus(amount, _unit(settings, unit)))
    except WeekTimeError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command(context_settings=_ARITHMETIC_CONTEXT)
@click.argument("day")
@click.argument("time")
@click.argument("amount", type=int)
@click.option("--unit", type=_UNIT_CHOICE, default=None, help="Unit of AMOUNT")
@click.pass_obj
def minus(settings: Settings, day: str, time: str, amount: int, unit: str | None) -> None:
    """Subtract AMOUNT units from DAY@TIME."""
    start = _moment(day, time)
    try:
        click.echo(start.minus(amount, _unit(settings, unit)))
    except WeekTimeError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
@click.argument("day")
@click.argument("time")
@click.argument("end_day")
@click.argument("end_time")
@click.option("--unit", type=_UNIT_CHOICE, default=None, help="Unit of the result")
@click.pass_obj
def until(
    settings: Settings,
    day: str,
    time: str,
    end_day: str,
    end_time: str,
    unit: str | None,
) -> None:
    """Whole units from DAY@TIME forward to the next END_DAY@END_TIME."""
    start = _moment(day, time)
    end = _moment(end_day, end_time)
    try:
        click.echo(start.until(end, _unit(settings, unit)))
    except WeekTimeError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
def now() -> None:
    """Print the current weekly moment (UTC)."""
    click.echo(WeeklyMoment.now())
