"""Analytics API router: RevPAR, occupancy, and revenue breakdowns.

Every endpoint is scoped to one organisation and a closed date range
``[start_date, end_date]``; a single-day range is valid.
"""

import logging
import uuid
from collections.abc import Awaitable
from datetime import date
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, status

from concierge.analytics import AnalyticsService, AnalyticsStoreError
from concierge.api.deps import get_analytics_service
from concierge.schemas.analytics import (
    OccupationByMonth,
    OccupationByProperty,
    PortfolioAnalytics,
    RevenueAnalytics,
    RevenueByPlatform,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class ReportQuery:
    """Query parameters shared by every analytics endpoint."""

    def __init__(
        self,
        start_date: date = Query(..., description="First day of the report (inclusive)"),
        end_date: date = Query(..., description="Last day of the report (inclusive)"),
        organisation_id: uuid.UUID = Query(..., description="Organisation to report on"),
    ):
        if end_date < start_date:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="end_date must not be before start_date",
            )
        self.start_date = start_date
        self.end_date = end_date
        self.organisation_id = organisation_id


async def _run(report: Awaitable[T]) -> T:
    """Await a report, turning store failures into 503 responses."""
    try:
        return await report
    except AnalyticsStoreError:
        logger.warning("Analytics store unavailable", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Analytics store unavailable",
        )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/revenue", response_model=RevenueAnalytics)
async def get_revenue_analytics(
    query: ReportQuery = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
) -> RevenueAnalytics:
    """RevPAR, ADR, and average stay duration for the organisation."""
    return await _run(service.revenue_analytics(query.start_date, query.end_date, query.organisation_id))


@router.get("/occupancy/properties", response_model=list[OccupationByProperty])
async def get_occupation_by_property(
    query: ReportQuery = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
) -> list[OccupationByProperty]:
    """Occupancy per active property, highest occupation rate first."""
    return await _run(service.occupation_by_property(query.start_date, query.end_date, query.organisation_id))


@router.get("/occupancy/months", response_model=list[OccupationByMonth])
async def get_occupation_by_month(
    query: ReportQuery = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
) -> list[OccupationByMonth]:
    """Occupancy and pro-rated revenue per calendar month."""
    return await _run(service.occupation_by_month(query.start_date, query.end_date, query.organisation_id))


@router.get("/revenue/platforms", response_model=list[RevenueByPlatform])
async def get_revenue_by_platform(
    query: ReportQuery = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
) -> list[RevenueByPlatform]:
    """Revenue per booking channel.

    Unlike the monthly report, amounts are not pro-rated: a booking touching
    the range counts with its full amount.
    """
    return await _run(service.revenue_by_platform(query.start_date, query.end_date, query.organisation_id))


@router.get("/summary", response_model=PortfolioAnalytics)
async def get_portfolio_summary(
    query: ReportQuery = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
) -> PortfolioAnalytics:
    """All analytics reports computed from one snapshot."""
    return await _run(service.portfolio(query.start_date, query.end_date, query.organisation_id))
