"""Exception types for the checksum engine.

All derive from ``ValueError`` so callers that already guard ingest with
``except ValueError`` keep working.
"""

from __future__ import annotations


class ChecksumError(ValueError):
    """Base class for checksum engine failures."""


class InvalidInputError(ChecksumError):
    """Raised when an addend, width or material value is outside its domain."""


class OverflowDetectedError(ChecksumError):
    """Raised in strict mode when a value or the sum does not fit the register."""

    def __init__(self, value: int, width: int) -> None:
        self.value = value
        self.width = width
        super().__init__(f"value {value} does not fit in a {width}-bit register")
