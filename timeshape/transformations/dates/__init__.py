"""Date presentation transformers for tabular records."""

from .timestamp_formatter import TimestampColumnFormatter, TimestampUnit

__all__ = ["TimestampColumnFormatter", "TimestampUnit"]
