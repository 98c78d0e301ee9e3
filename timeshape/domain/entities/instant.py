from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
import math

from ...constants import Defaults, Durations
from ..exceptions import InvalidInstantError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class Instant:
    """A point on the universal time axis, stored as epoch milliseconds.

    ``epoch_ms`` is ``None`` only for the invalid sentinel, which is what
    unparseable or out-of-range sources collapse to.
    """

    epoch_ms: int | None

    @classmethod
    def invalid(cls) -> Instant:
        return INVALID_INSTANT

    @classmethod
    def from_epoch_ms(cls, value: int | float) -> Instant:
        if isinstance(value, float):
            if not math.isfinite(value):
                return INVALID_INSTANT
        value = int(value)
        if not Durations.MIN_EPOCH_MS <= value <= Durations.MAX_EPOCH_MS:
            return INVALID_INSTANT
        return cls(value)

    @classmethod
    def from_datetime(cls, value: datetime) -> Instant:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return cls.from_epoch_ms((value - EPOCH) // _ONE_MS)

    @property
    def is_valid(self) -> bool:
        return self.epoch_ms is not None

    def require_epoch_ms(self) -> int:
        if self.epoch_ms is None:
            raise InvalidInstantError("Invalid instant has no epoch value")
        return self.epoch_ms

    def to_datetime(self) -> datetime:
        return EPOCH + timedelta(milliseconds=self.require_epoch_ms())

    def isoformat(self) -> str:
        if self.epoch_ms is None:
            return Defaults.INVALID_MARKER
        return self.to_datetime().isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        )

    def __str__(self) -> str:
        return self.isoformat()


INVALID_INSTANT = Instant(None)


@dataclass(frozen=True, slots=True)
class Valid:
    instant: Instant

    def to_instant(self) -> Instant:
        return self.instant


@dataclass(frozen=True, slots=True)
class Invalid:
    source: object
    reason: str

    def to_instant(self) -> Instant:
        return INVALID_INSTANT


ParsedInstant = Valid | Invalid
