"""Logging infrastructure.

This module provides logging adapters and implementations.
"""

from .console_logger import ConsoleLogger, LogContext, LogLevel
from .logging_config import create_logger, get_logger, set_logger
from .null_logger import NullLogger

__all__ = [
    "ConsoleLogger",
    "LogContext",
    "LogLevel",
    "NullLogger",
    "create_logger",
    "get_logger",
    "set_logger",
]
