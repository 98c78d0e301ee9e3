"""Domain entities.

Core value objects: the ``Instant`` and the tagged parse result.
"""

from .instant import (
    EPOCH,
    INVALID_INSTANT,
    Instant,
    Invalid,
    ParsedInstant,
    Valid,
)

__all__ = [
    "EPOCH",
    "INVALID_INSTANT",
    "Instant",
    "Invalid",
    "ParsedInstant",
    "Valid",
]
