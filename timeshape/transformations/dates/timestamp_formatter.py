"""Timestamp column formatter transformer.

Renders timestamp columns of API records (epoch milliseconds, epoch seconds
or ISO 8601 text) into display strings with any instant formatter from
``timeshape.dates``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
import numbers
from typing import Literal

import pandas as pd

from ...application.ports.services import LoggerPort
from ...constants import Defaults
from ...domain.entities.instant import INVALID_INSTANT, Instant
from ...domain.services.transformers import from_timestamp, parse_instant
from ...infrastructure.logging.null_logger import NullLogger
from ..base import TransformationContext, TransformationResult

TimestampUnit = Literal["auto", "ms", "s", "iso"]


class TimestampColumnFormatter:
    """Transformer that formats timestamp columns for presentation.

    Cells that cannot be read as an instant render the invalid marker and
    are reported as warnings; missing cells stay missing.

    Example:
        >>> from timeshape.dates import format_date_human
        >>> formatter = TimestampColumnFormatter(
        ...     ["created_at"], format_date_human("America/New_York"), unit="s"
        ... )
        >>> result = formatter.transform(df, TransformationContext(entity="order"))
        >>> result.data["created_at"].iloc[0]
        'December 25, 2023 5:30 AM EST'
    """

    def __init__(
        self,
        columns: Sequence[str],
        render: Callable[[Instant], str],
        *,
        unit: TimestampUnit = "auto",
        invalid_marker: str = Defaults.INVALID_MARKER,
        logger: LoggerPort | None = None,
    ) -> None:
        if unit not in ("auto", "ms", "s", "iso"):
            raise ValueError(f"unit must be one of auto, ms, s, iso; got {unit!r}")
        self.columns = tuple(columns)
        self.render = render
        self.unit: TimestampUnit = unit
        self.invalid_marker = invalid_marker
        self.logger = logger or NullLogger()

    def can_transform(self, df: pd.DataFrame, entity: str) -> bool:
        _ = entity
        return any(col in df.columns for col in self.columns)

    def transform(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult:
        transformed_df = df.copy()
        processed: list[str] = []
        invalid_counts: dict[str, int] = {}
        warnings: list[str] = []

        for col in self.columns:
            if col not in transformed_df.columns:
                continue
            instants = transformed_df[col].map(self.to_instant)
            present = instants.notna()
            invalid = int(
                instants[present].map(lambda instant: not instant.is_valid).sum()
            )
            rendered = instants.map(self._render_cell)
            transformed_df[col] = rendered.astype("string")
            processed.append(col)
            invalid_counts[col] = invalid
            if invalid:
                warnings.append(f"{col}: {invalid} values could not be read as dates")
            self.logger.log_column_formatted(col, int(present.sum()), invalid)

        if not processed:
            return TransformationResult(
                data=transformed_df,
                applied=False,
                message="No timestamp columns found",
            )

        noun = "column" if len(processed) == 1 else "columns"
        source = f" from {context.source}" if context.source else ""
        return TransformationResult(
            data=transformed_df,
            applied=True,
            message=f"Formatted {len(processed)} timestamp {noun}{source}",
            warnings=warnings,
            metadata={
                "columns_processed": processed,
                "invalid_counts": invalid_counts,
                "input_rows": len(df),
                "output_rows": len(transformed_df),
            },
        )

    def to_instant(self, value: object) -> Instant | None:
        """Read one cell as an instant; ``None`` for a missing cell."""
        if value is None or value is pd.NaT:
            return None
        if isinstance(value, float) and value != value:
            return None
        if isinstance(value, bool):
            return INVALID_INSTANT
        if isinstance(value, datetime):
            return Instant.from_datetime(value)
        if isinstance(value, numbers.Real):
            if self.unit == "iso":
                return INVALID_INSTANT
            return from_timestamp(value, is_seconds=self.unit == "s")
        if isinstance(value, str):
            if self.unit in ("ms", "s"):
                return self._numeric_text(value)
            return parse_instant(value).to_instant()
        if pd.isna(value):
            return None
        return INVALID_INSTANT

    def _numeric_text(self, text: str) -> Instant:
        try:
            number = int(text.strip())
        except ValueError:
            return INVALID_INSTANT
        return from_timestamp(number, is_seconds=self.unit == "s")

    def _render_cell(self, instant: Instant | None) -> object:
        if instant is None:
            return pd.NA
        if not instant.is_valid:
            return self.invalid_marker
        return self.render(instant)
