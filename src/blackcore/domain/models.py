# src/blackcore/domain/models.py
"""
Domain Models - Wire Shape of a Unit

The canonical serialized form of a Unit is a record with an amount and a
unit code. Unit.to_payload() always emits the primary code (BLK); on input
any recognized code is accepted and checked later by the Unit constructor.

Files that USE this module:
- blackcore.domain.unit (to_payload, to_json, from_json)
- tests.test_unit (serialization tests)

Files that this module USES:
- pydantic (model validation and JSON encoding)
"""
from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt


class UnitPayload(BaseModel):
    """
    Serialized amount.

    Attributes:
        amount: Quantity expressed in `code`
        code: Denomination code of `amount` (BLK on output)
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    amount: Union[StrictInt, StrictFloat]
    code: str
