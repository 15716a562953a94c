# src/blackcore/domain/denominations.py
"""
Denomination Table - Scale and Display Precision per Unit Code

Authoritative, read-only table of the four BLK denominations. Scales are
expressed in ratoshis (the indivisible unit) per one unit of the code.

Files that USE this module:
- blackcore.domain.unit (scale/precision lookups for every conversion)
- blackcore.config.settings (validates the configured default code)
- tests.test_denominations (unit tests)

Files that this module USES:
- blackcore.domain.errors (UnknownCodeError)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional

from blackcore.domain.errors import UnknownCodeError


class Denomination(str, Enum):
    """Recognized unit codes. Members compare equal to their string code."""
    BLK = "BLK"
    MBLK = "mBLK"
    UBLK = "uBLK"
    RATOSHIS = "ratoshis"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DenominationSpec:
    """
    Conversion data for one denomination.

    Attributes:
        scale: Ratoshis per one unit of the denomination
        precision: Decimal digits kept when converting to the denomination
    """
    scale: int
    precision: int


# Ordered from the primary unit down to the atomic unit.
DENOMINATIONS: Final[Mapping[str, DenominationSpec]] = MappingProxyType({
    Denomination.BLK.value: DenominationSpec(scale=100_000_000, precision=8),
    Denomination.MBLK.value: DenominationSpec(scale=100_000, precision=5),
    Denomination.UBLK.value: DenominationSpec(scale=100, precision=2),
    Denomination.RATOSHIS.value: DenominationSpec(scale=1, precision=0),
})

PRIMARY_CODE: Final[str] = Denomination.BLK.value
ATOMIC_CODE: Final[str] = Denomination.RATOSHIS.value


def _normalize(code) -> Optional[str]:
    if isinstance(code, Denomination):
        return code.value
    if isinstance(code, str):
        return code
    return None


def is_known_code(code) -> bool:
    """Return True if code names one of the four denominations."""
    key = _normalize(code)
    return key is not None and key in DENOMINATIONS


def lookup(code) -> DenominationSpec:
    """
    Resolve the scale and precision for a denomination code.

    Args:
        code: A Denomination member or its string code (e.g. "mBLK")

    Returns:
        DenominationSpec for the code

    Raises:
        UnknownCodeError: If code is not a recognized denomination
    """
    key = _normalize(code)
    if key is None or key not in DENOMINATIONS:
        raise UnknownCodeError(code)
    return DENOMINATIONS[key]
