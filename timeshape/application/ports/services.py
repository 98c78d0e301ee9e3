from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.instant import Instant


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_column_formatted(
        self, column: str, row_count: int, invalid_count: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class ClockPort(Protocol):
    """Source of the current instant.

    Sampled once per formatting call; implementations may be fixed for tests.
    """

    def now(self) -> Instant: ...


@runtime_checkable
class ZoneProviderPort(Protocol):
    """Source of the ambient default timezone identifier.

    Must always return a non-empty identifier the tz database can resolve.
    """

    def default_zone(self) -> str: ...
