"""Seed the database with a demo organisation for the analytics dashboards.

Creates four properties (one of them inactive) and a spread of bookings
across channels and statuses, relative to today, with one confirmed stay
that has no amount.

Run from the backend directory:
    python -m scripts.seed_data
"""

import asyncio
import uuid
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import delete

from concierge.database import Base, async_session_factory, engine
from concierge.models import Booking, BookingPlatform, BookingStatus, Property, PropertyStatus

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

DEMO_ORGANISATION_ID = uuid.UUID("00000000-0000-4000-8000-000000000001")

PROPERTIES = [
    {"name": "Appartement Vieux-Port", "status": PropertyStatus.ACTIVE, "nightly": Decimal("95.00")},
    {"name": "Studio Panier", "status": PropertyStatus.ACTIVE, "nightly": Decimal("68.00")},
    {"name": "Villa Corniche", "status": PropertyStatus.ACTIVE, "nightly": Decimal("240.00")},
    {"name": "Loft Belle de Mai", "status": PropertyStatus.INACTIVE, "nightly": Decimal("80.00")},
]

PROPERTIES_BY_NAME = {p["name"]: p for p in PROPERTIES}

# (property name, check-in offset, nights, status, platform)
BOOKINGS = [
    ("Appartement Vieux-Port", -58, 4, BookingStatus.CONFIRMED, BookingPlatform.AIRBNB),
    ("Appartement Vieux-Port", -40, 6, BookingStatus.CONFIRMED, BookingPlatform.BOOKING),
    ("Appartement Vieux-Port", -12, 3, BookingStatus.CANCELLED, BookingPlatform.AIRBNB),
    ("Appartement Vieux-Port", -5, 7, BookingStatus.CONFIRMED, BookingPlatform.DIRECT),
    ("Studio Panier", -45, 2, BookingStatus.CONFIRMED, BookingPlatform.AIRBNB),
    ("Studio Panier", -20, 9, BookingStatus.CONFIRMED, BookingPlatform.AIRBNB),
    ("Studio Panier", 4, 3, BookingStatus.PENDING, BookingPlatform.BOOKING),
    ("Villa Corniche", -35, 10, BookingStatus.CONFIRMED, BookingPlatform.DIRECT),
    ("Villa Corniche", -14, 5, BookingStatus.CONFIRMED, BookingPlatform.OTHER),
    ("Loft Belle de Mai", -30, 4, BookingStatus.CONFIRMED, BookingPlatform.BOOKING),
]


def _build_bookings(properties: dict[str, Property], today: date) -> list[Booking]:
    """Turn BOOKINGS into model instances; the last confirmed stay has no amount."""
    bookings = []
    for name, offset, nights, status, platform in BOOKINGS:
        prop = properties[name]
        check_in = today + timedelta(days=offset)
        bookings.append(
            Booking(
                organisation_id=DEMO_ORGANISATION_ID,
                property_id=prop.id,
                check_in=check_in,
                check_out=check_in + timedelta(days=nights),
                status=status.value,
                platform=platform.value,
                amount=PROPERTIES_BY_NAME[name]["nightly"] * nights,
            )
        )
    bookings[-1].amount = None
    return bookings


# ---------------------------------------------------------------------------
# Main seed function
# ---------------------------------------------------------------------------


async def seed() -> None:
    """Populate the database with the demo organisation.

    Idempotent: removes the organisation's rows before inserting them again.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        await session.execute(delete(Booking).where(Booking.organisation_id == DEMO_ORGANISATION_ID))
        await session.execute(delete(Property).where(Property.organisation_id == DEMO_ORGANISATION_ID))
        await session.flush()

        created: dict[str, Property] = {}
        for data in PROPERTIES:
            prop = Property(
                organisation_id=DEMO_ORGANISATION_ID,
                name=data["name"],
                status=data["status"].value,
            )
            session.add(prop)
            created[prop.name] = prop
        await session.flush()

        bookings = _build_bookings(created, date.today())
        session.add_all(bookings)
        await session.commit()

    print(f"Seeded organisation {DEMO_ORGANISATION_ID}")
    print(f"   Properties: {len(created)}")
    print(f"   Bookings:   {len(bookings)}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
