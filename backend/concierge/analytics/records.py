"""Read-only inputs to the aggregators, normalised at ingestion.

Nullable or malformed store fields are resolved here so the aggregation
math only ever handles total values.
"""

import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from concierge.models.enums import BookingPlatform

ZERO = Decimal("0")


def coerce_amount(value: object) -> Decimal:
    """Convert a stored amount to ``Decimal``; missing or malformed values become 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not amount.is_finite():
        return ZERO
    return amount


@dataclass(frozen=True)
class PropertyRecord:
    id: uuid.UUID
    name: str


@dataclass(frozen=True)
class BookingRecord:
    """A confirmed stay as seen by the aggregators."""

    property_id: uuid.UUID | None
    check_in: date
    check_out: date
    amount: Decimal = ZERO
    platform: BookingPlatform = BookingPlatform.OTHER

    @classmethod
    def from_row(
        cls,
        property_id: uuid.UUID | None,
        check_in: date,
        check_out: date,
        amount: object,
        platform: object,
    ) -> "BookingRecord":
        return cls(
            property_id=property_id,
            check_in=check_in,
            check_out=check_out,
            amount=coerce_amount(amount),
            platform=BookingPlatform.coerce(platform),
        )
