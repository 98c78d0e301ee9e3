"""Adapters for the ambient inputs: the current time and the host timezone."""

from .clock import FixedClock, SystemClock
from .zone_provider import EnvironmentZoneProvider, FixedZoneProvider

__all__ = [
    "EnvironmentZoneProvider",
    "FixedClock",
    "FixedZoneProvider",
    "SystemClock",
]
