from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from rich.console import Console

from ..config import ConfigLoader, TimeshapeConfig
from ..transformations.dates.timestamp_formatter import (
    TimestampColumnFormatter,
    TimestampUnit,
)
from .environment.clock import SystemClock
from .environment.zone_provider import EnvironmentZoneProvider
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import ClockPort, LoggerPort, ZoneProviderPort
    from ..domain.entities.instant import Instant


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: TimeshapeConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or TimeshapeConfig()
        self._logger_instance: LoggerPort | None = None
        self._clock_instance: ClockPort | None = None
        self._zone_provider_instance: ZoneProviderPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_clock(self) -> ClockPort:
        if self._clock_instance is None:
            self._clock_instance = SystemClock()
        return self._clock_instance

    def create_zone_provider(self) -> ZoneProviderPort:
        if self._zone_provider_instance is None:
            self._zone_provider_instance = EnvironmentZoneProvider(
                self.config.fallback_zone, logger=self.create_logger()
            )
        return self._zone_provider_instance

    def create_column_formatter(
        self,
        columns: Sequence[str],
        render: Callable[[Instant], str],
        *,
        unit: TimestampUnit = "auto",
    ) -> TimestampColumnFormatter:
        return TimestampColumnFormatter(
            columns,
            render,
            unit=unit,
            invalid_marker=self.config.invalid_marker,
            logger=self.create_logger(),
        )

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._clock_instance = None
        self._zone_provider_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_clock(self, clock: ClockPort) -> None:
        self._clock_instance = clock

    def override_zone_provider(self, zone_provider: ZoneProviderPort) -> None:
        self._zone_provider_instance = zone_provider


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=ConfigLoader.load())
