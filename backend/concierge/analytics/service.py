"""Analytics operations: fetch one snapshot, then aggregate in memory.

Every operation issues its reads concurrently and only aggregates once all
of them have succeeded. A failed read propagates unchanged, so callers get
either a complete report or an error, never a partial one.
"""

import asyncio
import logging
import uuid
from datetime import date

from concierge.analytics.aggregators import (
    compute_occupation_by_month,
    compute_occupation_by_property,
    compute_revenue_analytics,
    compute_revenue_by_platform,
)
from concierge.analytics.labels import DEFAULT_LOCALE
from concierge.analytics.records import BookingRecord, PropertyRecord
from concierge.analytics.store import AnalyticsStore
from concierge.schemas.analytics import (
    OccupationByMonth,
    OccupationByProperty,
    PortfolioAnalytics,
    RevenueAnalytics,
    RevenueByPlatform,
)

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Occupancy and revenue reports for one store.

    Holds no per-call state: the same inputs always produce the same result.
    """

    def __init__(self, store: AnalyticsStore, locale: str = DEFAULT_LOCALE):
        self.store = store
        self.locale = locale

    async def _fetch(
        self,
        start: date,
        end: date,
        organisation_id: uuid.UUID,
    ) -> tuple[list[PropertyRecord], list[BookingRecord]]:
        # A failed read cancels the other one before the error reaches the caller
        try:
            async with asyncio.TaskGroup() as tg:
                properties_task = tg.create_task(self.store.list_active_properties(organisation_id))
                bookings_task = tg.create_task(self.store.list_confirmed_bookings(organisation_id, start, end))
        except ExceptionGroup as group:
            raise group.exceptions[0] from None
        properties, bookings = properties_task.result(), bookings_task.result()
        logger.debug(
            "Fetched %d active properties and %d confirmed bookings for %s (%s..%s)",
            len(properties),
            len(bookings),
            organisation_id,
            start,
            end,
        )
        return properties, bookings

    async def revenue_analytics(
        self, start: date, end: date, organisation_id: uuid.UUID
    ) -> RevenueAnalytics:
        properties, bookings = await self._fetch(start, end, organisation_id)
        return compute_revenue_analytics(properties, bookings, start, end)

    async def occupation_by_property(
        self, start: date, end: date, organisation_id: uuid.UUID
    ) -> list[OccupationByProperty]:
        properties, bookings = await self._fetch(start, end, organisation_id)
        return compute_occupation_by_property(properties, bookings, start, end)

    async def occupation_by_month(
        self, start: date, end: date, organisation_id: uuid.UUID
    ) -> list[OccupationByMonth]:
        properties, bookings = await self._fetch(start, end, organisation_id)
        return compute_occupation_by_month(properties, bookings, start, end, self.locale)

    async def revenue_by_platform(
        self, start: date, end: date, organisation_id: uuid.UUID
    ) -> list[RevenueByPlatform]:
        """Platform breakdown; only needs the booking read."""
        bookings = await self.store.list_confirmed_bookings(organisation_id, start, end)
        return compute_revenue_by_platform(bookings, self.locale)

    async def portfolio(
        self, start: date, end: date, organisation_id: uuid.UUID
    ) -> PortfolioAnalytics:
        """All four reports computed from a single fetch."""
        properties, bookings = await self._fetch(start, end, organisation_id)
        return PortfolioAnalytics(
            period_start=start,
            period_end=end,
            revenue=compute_revenue_analytics(properties, bookings, start, end),
            properties=compute_occupation_by_property(properties, bookings, start, end),
            months=compute_occupation_by_month(properties, bookings, start, end, self.locale),
            platforms=compute_revenue_by_platform(bookings, self.locale),
        )
