# src/blackcore/domain/unit.py
"""
Unit - Immutable BLK Amount with Denomination Conversion

A Unit stores a single signed integer, the amount in ratoshis, and derives
every other representation from it and the denomination table. Units can be
created from any denomination or from a fiat amount plus a BLK/fiat rate,
and converted back to any denomination or fiat rate.

    Unit.from_blk(1.3).to_ratoshis()      # 130000000
    Unit.from_bits(1.3).to(Denomination.MBLK)  # 0.0013
    Unit.from_fiat(1.3, 350).ublk         # 3714.29
    Unit(1.3, "uBLK").blk                 # 1.3e-06

Rounding is done in decimal arithmetic and is always half away from zero,
both when scaling an input amount to ratoshis and when rounding a
conversion to the target precision. Float inputs are read through their
shortest repr, so 1.234567895 BLK is 123456790 ratoshis on every platform.

Files that USE this module:
- blackcore (package export)
- blackcore.app (command-line conversions)
- tests.test_unit (unit tests)

Files that this module USES:
- blackcore.domain.denominations (scale and precision table)
- blackcore.domain.errors (InvalidRateError, UnknownCodeError, InvalidArgumentError)
- blackcore.domain.models (UnitPayload wire shape)
- blackcore.shared.preconditions (argument checks)
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Union

from pydantic import ValidationError

from blackcore.domain.denominations import (
    ATOMIC_CODE,
    DENOMINATIONS,
    PRIMARY_CODE,
    Denomination,
    lookup,
)
from blackcore.domain.errors import InvalidArgumentError, InvalidRateError
from blackcore.domain.models import UnitPayload
from blackcore.shared.preconditions import (
    check_argument,
    check_finite_number,
    is_number,
    to_decimal,
)

log = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


# Wide enough to scale and quantize any float amount exactly (1e308 BLK is
# 309 digits of ratoshis). Amounts past it raise InvalidArgumentError.
_CONTEXT = Context(prec=1000, rounding=ROUND_HALF_UP, traps=[InvalidOperation])


def _round_half_away(value: Decimal, places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=_CONTEXT)


def _check_rate(rate) -> Decimal:
    value = to_decimal(rate)
    if not value.is_finite() or value <= 0:
        raise InvalidRateError(rate)
    return value


def _accessor(code: Denomination) -> property:
    def getter(self) -> Number:
        return self.to(code)

    getter.__name__ = code.value
    getter.__doc__ = f"Value expressed in {code.value}."
    return property(getter)


class Unit:
    """
    An amount of BLK, stored as an integer number of ratoshis.

    Args:
        amount: The amount to represent, in `code` units or in fiat
        code: A denomination code, or a positive BLK/fiat exchange rate

    Raises:
        InvalidRateError: If `code` is a rate that is zero, negative or not finite
        UnknownCodeError: If `code` is not a recognized denomination
        InvalidArgumentError: If `amount` is not a finite number
    """

    __slots__ = ("_value",)

    def __init__(self, amount: Number, code: Union[str, Denomination, Number]):
        if is_number(code):
            rate = _check_rate(code)
            value = _CONTEXT.divide(check_finite_number(amount), rate)
            log.debug("Converted fiat amount %s at rate %s to %s BLK", amount, code, value)
            code = PRIMARY_CODE
        else:
            value = check_finite_number(amount)

        spec = lookup(code)
        try:
            ratoshis = _round_half_away(_CONTEXT.multiply(value, spec.scale), 0)
        except InvalidOperation as e:
            raise InvalidArgumentError(f"amount out of range: {amount!r}") from e
        object.__setattr__(self, "_value", int(ratoshis))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self).from_ratoshis, (self._value,))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_blk(cls, amount: Number) -> "Unit":
        """Create a Unit from an amount in BLK."""
        return cls(amount, Denomination.BLK)

    @classmethod
    def from_milli(cls, amount: Number) -> "Unit":
        """Create a Unit from an amount in mBLK."""
        return cls(amount, Denomination.MBLK)

    from_millis = from_milli

    @classmethod
    def from_micro(cls, amount: Number) -> "Unit":
        """Create a Unit from an amount in uBLK (bits)."""
        return cls(amount, Denomination.UBLK)

    from_micros = from_micro
    from_bits = from_micro

    @classmethod
    def from_ratoshis(cls, amount: Number) -> "Unit":
        """Create a Unit from an amount in ratoshis."""
        return cls(amount, Denomination.RATOSHIS)

    @classmethod
    def from_fiat(cls, amount: Number, rate: Number) -> "Unit":
        """
        Create a Unit from a fiat amount and the BLK/fiat exchange rate.

        Args:
            amount: The amount in fiat
            rate: Price of one BLK in the same fiat currency
        """
        return cls(amount, rate)

    @classmethod
    def from_object(cls, data) -> "Unit":
        """
        Create a Unit from a plain record with `amount` and `code` keys.

        Raises:
            InvalidArgumentError: If data is not a mapping or lacks either key
        """
        if isinstance(data, UnitPayload):
            data = data.model_dump()
        check_argument(isinstance(data, Mapping), "Argument is expected to be an object")
        check_argument(
            "amount" in data and "code" in data,
            "Argument is expected to have 'amount' and 'code' keys",
        )
        return cls(data["amount"], data["code"])

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Unit":
        """Create a Unit from its JSON form, e.g. '{"amount": 1.3, "code": "BLK"}'."""
        try:
            payload = UnitPayload.model_validate_json(text)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid unit JSON: {e}") from e
        return cls.from_object(payload)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @property
    def magnitude(self) -> int:
        """The amount in ratoshis."""
        return self._value

    def to(self, code: Union[str, Denomination, Number]) -> Number:
        """
        Return the value expressed in a denomination or at a fiat rate.

        Args:
            code: A denomination code, or a positive BLK/fiat exchange rate

        Returns:
            The converted value. Fiat values are rounded to 2 decimals,
            denominations to their display precision. Ratoshis are an int,
            everything else a float.

        Raises:
            InvalidRateError: If `code` is a rate that is zero, negative or not finite
            UnknownCodeError: If `code` is not a recognized denomination
        """
        if is_number(code):
            rate = _check_rate(code)
            blk = _CONTEXT.divide(Decimal(self._value), DENOMINATIONS[PRIMARY_CODE].scale)
            try:
                return float(_round_half_away(_CONTEXT.multiply(blk, rate), 2))
            except InvalidOperation as e:
                raise InvalidArgumentError(f"fiat value out of range at rate {code!r}") from e

        spec = lookup(code)
        value = _round_half_away(_CONTEXT.divide(Decimal(self._value), spec.scale), spec.precision)
        return int(value) if spec.precision == 0 else float(value)

    def to_blk(self) -> float:
        """Return the value in BLK."""
        return self.to(Denomination.BLK)

    def to_milli(self) -> float:
        """Return the value in mBLK."""
        return self.to(Denomination.MBLK)

    to_millis = to_milli

    def to_micro(self) -> float:
        """Return the value in uBLK (bits)."""
        return self.to(Denomination.UBLK)

    to_micros = to_micro
    to_bits = to_micro

    def to_ratoshis(self) -> int:
        """Return the value in ratoshis."""
        return self.to(Denomination.RATOSHIS)

    def at_rate(self, rate: Number) -> float:
        """Return the value in fiat, rounded to 2 decimals, at a BLK/fiat rate."""
        return self.to(rate)

    blk = _accessor(Denomination.BLK)
    mblk = _accessor(Denomination.MBLK)
    ublk = _accessor(Denomination.UBLK)
    ratoshis = _accessor(Denomination.RATOSHIS)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_object(self) -> dict:
        """Return {"amount": <BLK value>, "code": "BLK"}, whatever the construction unit."""
        return {"amount": self.to(PRIMARY_CODE), "code": PRIMARY_CODE}

    def to_payload(self) -> UnitPayload:
        """Return the canonical record as a validated UnitPayload."""
        return UnitPayload(**self.to_object())

    def to_json(self) -> str:
        """Return the canonical record as a JSON string."""
        return self.to_payload().model_dump_json()

    def __str__(self) -> str:
        return f"{self.to(ATOMIC_CODE)} {ATOMIC_CODE}"

    def __repr__(self) -> str:
        return f"<Unit: {self}>"

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)
