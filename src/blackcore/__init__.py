# src/blackcore/__init__.py
"""
Blackcore Units - BLK Amounts and Denomination Conversion

An immutable value type for BLK amounts that converts between BLK, mBLK,
uBLK, ratoshis and fiat amounts at a caller-supplied exchange rate.
"""

from blackcore.domain import (
    DENOMINATIONS,
    Denomination,
    DomainError,
    InvalidArgumentError,
    InvalidRateError,
    Unit,
    UnitPayload,
    UnknownCodeError,
)

__version__ = "0.13.19"

__all__ = [
    "Unit",
    "UnitPayload",
    "Denomination",
    "DENOMINATIONS",
    "DomainError",
    "InvalidArgumentError",
    "InvalidRateError",
    "UnknownCodeError",
    "__version__",
]
