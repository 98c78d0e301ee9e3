"""Shared types for DataFrame record transformers."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd


@dataclass(frozen=True, slots=True)
class TransformationContext:
    """What is being transformed: ``entity`` names the record kind
    (``order``, ``user``) and ``source`` where the payload came from."""

    entity: str
    source: str | None = None


@dataclass(slots=True)
class TransformationResult:
    """Output frame plus a report of what was done.

    Unreadable values are reported in ``warnings`` instead of raising.
    """

    data: pd.DataFrame
    applied: bool = True
    message: str = ""
    warnings: list[str] = field(default_factory=list)
    metadata: dict[str, object] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.applied

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
