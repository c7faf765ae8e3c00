"""Read-only access to properties and bookings for the analytics engine."""

import logging
import uuid
from datetime import date
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from concierge.analytics.exceptions import AnalyticsStoreError
from concierge.analytics.records import BookingRecord, PropertyRecord
from concierge.models.booking import Booking
from concierge.models.enums import BookingStatus, PropertyStatus
from concierge.models.property import Property

logger = logging.getLogger(__name__)


class AnalyticsStore(Protocol):
    """The two reads every aggregation is built from."""

    async def list_active_properties(self, organisation_id: uuid.UUID) -> list[PropertyRecord]: ...

    async def list_confirmed_bookings(
        self,
        organisation_id: uuid.UUID,
        start: date,
        end: date,
    ) -> list[BookingRecord]: ...


class SQLAlchemyAnalyticsStore:
    """``AnalyticsStore`` backed by the relational database.

    Each read opens its own session so that the property and booking queries
    of one report can run concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_active_properties(self, organisation_id: uuid.UUID) -> list[PropertyRecord]:
        query = (
            select(Property.id, Property.name)
            .where(
                Property.organisation_id == organisation_id,
                Property.status == PropertyStatus.ACTIVE.value,
            )
            .order_by(Property.name)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                rows = result.all()
        except SQLAlchemyError as exc:
            logger.exception("Failed to load active properties for organisation %s", organisation_id)
            raise AnalyticsStoreError("Could not load properties") from exc

        return [PropertyRecord(id=row.id, name=row.name) for row in rows]

    async def list_confirmed_bookings(
        self,
        organisation_id: uuid.UUID,
        start: date,
        end: date,
    ) -> list[BookingRecord]:
        """Confirmed bookings touching ``[start, end]``, unclamped.

        The overlap filter is inclusive on both sides, so it also returns stays
        that check out on ``start``; the night clamp discards those later.
        """
        query = select(
            Booking.property_id,
            Booking.check_in,
            Booking.check_out,
            Booking.amount,
            Booking.platform,
        ).where(
            Booking.organisation_id == organisation_id,
            Booking.status == BookingStatus.CONFIRMED.value,
            Booking.check_out >= start,
            Booking.check_in <= end,
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                rows = result.all()
        except SQLAlchemyError as exc:
            logger.exception("Failed to load confirmed bookings for organisation %s", organisation_id)
            raise AnalyticsStoreError("Could not load bookings") from exc

        return [
            BookingRecord.from_row(
                property_id=row.property_id,
                check_in=row.check_in,
                check_out=row.check_out,
                amount=row.amount,
                platform=row.platform,
            )
            for row in rows
        ]
