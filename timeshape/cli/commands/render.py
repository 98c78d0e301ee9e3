"""Render commands - format a timestamp or date string for display."""

from __future__ import annotations

import click

from ...constants import Patterns
from ...dates import (
    format_date,
    format_date_human,
    format_date_human_full,
    format_date_smart,
    format_eu_date,
    format_relative,
    format_us_date,
)
from ...domain.services.transformers import RelativeOptions
from ...infrastructure.container import create_default_container
from ..helpers import read_instant, validate_zone

_seconds_option = click.option(
    "--seconds",
    "is_seconds",
    is_flag=True,
    help="Read integer VALUE as Unix seconds instead of milliseconds",
)
_zone_option = click.option(
    "--zone",
    callback=validate_zone,
    help="Timezone identifier (default: the host timezone)",
)
_verbose_option = click.option("-v", "--verbose", count=True, help="Verbose output")


@click.command()
@click.argument("value")
@click.option(
    "--style",
    type=click.Choice(["pattern", "us", "eu", "human", "human-full"]),
    default="pattern",
    show_default=True,
    help="Output style",
)
@click.option(
    "--pattern",
    default=Patterns.US_DATE,
    show_default=True,
    help="Format pattern used with --style pattern",
)
@_zone_option
@_seconds_option
@_verbose_option
def format_command(
    value: str,
    style: str,
    pattern: str,
    zone: str | None,
    is_seconds: bool,
    verbose: int,
) -> None:
    """Format VALUE as wall-clock text in a timezone."""
    container = create_default_container(verbose)
    logger = container.create_logger()
    config = container.config
    zones = container.create_zone_provider()
    instant = read_instant(value, is_seconds=is_seconds)

    if style == "us":
        render = format_us_date(zone, config=config)
    elif style == "eu":
        render = format_eu_date(zone, config=config)
    elif style == "human":
        render = format_date_human(zone, zones=zones, config=config)
    elif style == "human-full":
        render = format_date_human_full(zone, zones=zones, config=config)
    else:
        render = format_date(pattern, zone, zones=zones, config=config)

    logger.verbose(f"Rendering {instant.isoformat()} with style {style}")
    click.echo(render(instant))


@click.command()
@click.argument("value")
@click.option("--no-suffix", is_flag=True, help="Omit 'in' / 'ago'")
@_seconds_option
@_verbose_option
def relative_command(value: str, no_suffix: bool, is_seconds: bool, verbose: int) -> None:
    """Describe VALUE relative to now, e.g. '3 days ago'."""
    container = create_default_container(verbose)
    instant = read_instant(value, is_seconds=is_seconds)
    render = format_relative(
        RelativeOptions(add_suffix=not no_suffix),
        clock=container.create_clock(),
        config=container.config,
    )
    click.echo(render(instant))


@click.command()
@click.argument("value")
@click.option(
    "--cutoff-days",
    type=click.FloatRange(min=0),
    default=None,
    help="Show an absolute date beyond this many days (default: configured, 7)",
)
@_zone_option
@_seconds_option
@_verbose_option
def smart_command(
    value: str,
    cutoff_days: float | None,
    zone: str | None,
    is_seconds: bool,
    verbose: int,
) -> None:
    """Relative text for recent VALUEs, a full date for older ones."""
    container = create_default_container(verbose)
    instant = read_instant(value, is_seconds=is_seconds)
    render = format_date_smart(
        cutoff_days,
        zone,
        clock=container.create_clock(),
        zones=container.create_zone_provider(),
        config=container.config,
    )
    click.echo(render(instant))
