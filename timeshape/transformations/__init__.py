"""Record transformers that adapt API payloads into presentation shape."""

from .base import TransformationContext, TransformationResult
from .dates import TimestampColumnFormatter

__all__ = [
    "TimestampColumnFormatter",
    "TransformationContext",
    "TransformationResult",
]
