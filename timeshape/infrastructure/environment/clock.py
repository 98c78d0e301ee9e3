from __future__ import annotations

import time
from typing import override

from ...application.ports.services import ClockPort
from ...domain.entities.instant import Instant


class SystemClock(ClockPort):
    pass

    @override
    def now(self) -> Instant:
        return Instant.from_epoch_ms(time.time_ns() // 1_000_000)


class FixedClock(ClockPort):
    """Clock frozen at one instant; ``advance`` moves it by milliseconds."""

    def __init__(self, instant: Instant) -> None:
        super().__init__()
        self._instant = instant

    @override
    def now(self) -> Instant:
        return self._instant

    def set(self, instant: Instant) -> None:
        self._instant = instant

    def advance(self, milliseconds: int) -> None:
        self._instant = Instant.from_epoch_ms(
            self._instant.require_epoch_ms() + milliseconds
        )
