"""Ports (protocols) the domain services and adapters depend on."""

from .services import ClockPort, LoggerPort, ZoneProviderPort

__all__ = [
    "ClockPort",
    "LoggerPort",
    "ZoneProviderPort",
]
