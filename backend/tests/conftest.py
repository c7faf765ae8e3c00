"""Shared test configuration and fixtures.

Each test gets a throwaway SQLite database file (via aiosqlite) with all
tables created from ``Base.metadata``. Analytics reads open one session per
query, so fixtures hand out a session factory rather than a single session.
"""

import uuid
from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from concierge.analytics.records import BookingRecord, PropertyRecord
from concierge.database import Base, get_session_factory
from concierge.main import app
from concierge.models import Booking, BookingPlatform, BookingStatus, Property, PropertyStatus

# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine on a fresh SQLite file with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'analytics.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the test database."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: organisation data inserted directly via ORM
# ---------------------------------------------------------------------------


@pytest.fixture
def organisation_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def add_property(session_factory, organisation_id):
    """Return a coroutine that inserts a property and returns it."""

    async def _add(
        name: str = "Appartement Vieux-Port",
        status: PropertyStatus = PropertyStatus.ACTIVE,
        organisation: uuid.UUID | None = None,
    ) -> Property:
        async with session_factory() as session:
            prop = Property(
                organisation_id=organisation or organisation_id,
                name=name,
                status=status.value,
            )
            session.add(prop)
            await session.commit()
            return prop

    return _add


@pytest.fixture
def add_booking(session_factory, organisation_id):
    """Return a coroutine that inserts a booking and returns it."""

    async def _add(
        prop: Property | None,
        check_in: date,
        check_out: date,
        amount: Decimal | None = Decimal("0"),
        platform: str | None = BookingPlatform.DIRECT.value,
        status: BookingStatus = BookingStatus.CONFIRMED,
        organisation: uuid.UUID | None = None,
    ) -> Booking:
        async with session_factory() as session:
            booking = Booking(
                organisation_id=organisation or organisation_id,
                property_id=prop.id if prop is not None else None,
                check_in=check_in,
                check_out=check_out,
                amount=amount,
                platform=platform,
                status=status.value,
            )
            session.add(booking)
            await session.commit()
            return booking

    return _add


# ---------------------------------------------------------------------------
# In-memory store for service tests
# ---------------------------------------------------------------------------


class FakeAnalyticsStore:
    """Serves fixed records and remembers which reads were made."""

    def __init__(
        self,
        properties: list[PropertyRecord] | None = None,
        bookings: list[BookingRecord] | None = None,
        error: Exception | None = None,
    ):
        self.properties = properties or []
        self.bookings = bookings or []
        self.error = error
        self.calls: list[tuple] = []

    async def list_active_properties(self, organisation_id):
        self.calls.append(("properties", organisation_id))
        if self.error is not None:
            raise self.error
        return list(self.properties)

    async def list_confirmed_bookings(self, organisation_id, start, end):
        self.calls.append(("bookings", organisation_id, start, end))
        if self.error is not None:
            raise self.error
        return list(self.bookings)


@pytest.fixture
def fake_store_cls():
    return FakeAnalyticsStore


def booking(
    check_in: date,
    check_out: date,
    amount: str | int | float = 0,
    property_id: uuid.UUID | None = None,
    platform: BookingPlatform = BookingPlatform.DIRECT,
) -> BookingRecord:
    """Shorthand for building a ``BookingRecord`` in tests."""
    return BookingRecord(
        property_id=property_id,
        check_in=check_in,
        check_out=check_out,
        amount=Decimal(str(amount)),
        platform=platform,
    )


@pytest.fixture
def make_booking():
    return booking
