from __future__ import annotations

import re

import click

from ..domain.entities.instant import Instant, Invalid
from ..domain.services.transformers import from_timestamp, is_known_zone, parse_instant

_INTEGER = re.compile(r"^[+-]?\d+$")


def read_instant(value: str, *, is_seconds: bool = False) -> Instant:
    """Read a CLI argument as an epoch timestamp or a date/time string."""
    text = value.strip()
    if _INTEGER.match(text):
        instant = from_timestamp(int(text), is_seconds=is_seconds)
        if not instant.is_valid:
            raise click.BadParameter(f"{value!r} is outside the supported range")
        return instant
    parsed = parse_instant(text)
    if isinstance(parsed, Invalid):
        raise click.BadParameter(f"{value!r} is not a date or timestamp ({parsed.reason})")
    return parsed.to_instant()


def validate_zone(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    _ = ctx, param
    if value is not None and not is_known_zone(value):
        raise click.BadParameter(f"unknown timezone {value!r}")
    return value
