# src/blackcore/domain/errors.py
"""
Domain Errors - Unit Conversion Exceptions

This module defines the exceptions raised while constructing or converting
BLK amounts. Each error carries the offending value so callers can report it.

Files that USE this module:
- blackcore.domain.denominations (UnknownCodeError on failed lookups)
- blackcore.domain.unit (InvalidRateError, UnknownCodeError)
- blackcore.shared.preconditions (InvalidArgumentError)
- blackcore.app (catches DomainError to produce an exit code)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidRateError(DomainError):
    """Raised when an exchange rate is zero, negative or not finite."""

    def __init__(self, rate):
        self.rate = rate
        super().__init__(f"Invalid exchange rate: {rate!r}")


class UnknownCodeError(DomainError):
    """Raised when a denomination code is not BLK, mBLK, uBLK or ratoshis."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unrecognized unit code: {code!r}")


class InvalidArgumentError(DomainError, TypeError):
    """Raised when an argument fails a precondition check."""
    pass
