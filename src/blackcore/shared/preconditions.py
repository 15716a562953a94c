# src/blackcore/shared/preconditions.py
"""
Argument Preconditions - Generic Input Checks

Small helpers that reject malformed arguments with InvalidArgumentError
before any domain-specific validation runs.

Files that USE this module:
- blackcore.domain.unit (amount checks and the from_object shape check)
- tests.test_preconditions (unit tests)

Files that this module USES:
- blackcore.domain.errors (InvalidArgumentError)
"""
from decimal import Decimal
from numbers import Real

from blackcore.domain.errors import InvalidArgumentError


def check_argument(condition, message: str = "Invalid argument") -> None:
    """
    Raise InvalidArgumentError unless condition is truthy.

    Args:
        condition: Value tested for truthiness
        message: Error message used when the check fails

    Raises:
        InvalidArgumentError: If condition is falsy
    """
    if not condition:
        raise InvalidArgumentError(message)


def is_number(value) -> bool:
    """Return True for int, float and Decimal values. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (Decimal, Real))


def to_decimal(value) -> Decimal:
    """
    Convert a real number to Decimal without picking up binary float noise.

    Floats go through their shortest round-trip repr, so 1.3 becomes
    Decimal("1.3") rather than Decimal("1.3000000000000000444...").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


def check_finite_number(value, name: str = "amount") -> Decimal:
    """
    Assert value is a finite real number and return it as Decimal.

    Raises:
        InvalidArgumentError: If value is not a number, or is NaN/infinite
    """
    check_argument(is_number(value), f"{name} must be a number, got {value!r}")
    result = to_decimal(value)
    check_argument(result.is_finite(), f"{name} must be finite, got {value!r}")
    return result
