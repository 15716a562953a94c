# src/blackcore/domain/__init__.py
"""
Domain Layer - Denominations and the Unit Value Type

This package contains the denomination table, the Unit value type and the
errors they raise. No dependencies on configuration or I/O.
"""

from blackcore.domain.denominations import (
    ATOMIC_CODE,
    DENOMINATIONS,
    PRIMARY_CODE,
    Denomination,
    DenominationSpec,
    is_known_code,
    lookup,
)
from blackcore.domain.errors import (
    DomainError,
    InvalidArgumentError,
    InvalidRateError,
    UnknownCodeError,
)
from blackcore.domain.models import UnitPayload
from blackcore.domain.unit import Unit

__all__ = [
    "Denomination",
    "DenominationSpec",
    "DENOMINATIONS",
    "PRIMARY_CODE",
    "ATOMIC_CODE",
    "is_known_code",
    "lookup",
    "Unit",
    "UnitPayload",
    "DomainError",
    "InvalidArgumentError",
    "InvalidRateError",
    "UnknownCodeError",
]
