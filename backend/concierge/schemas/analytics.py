"""Pydantic v2 schemas for analytics results.

All models are immutable value objects, rebuilt on every request.
"""

import uuid
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from concierge.models.enums import BookingPlatform


class RevenueAnalytics(BaseModel):
    """Portfolio-wide revenue efficiency over a date range."""

    model_config = ConfigDict(frozen=True)

    rev_par: Decimal  # revenue per available property-night, 2 dp
    adr: Decimal  # average daily rate, 2 dp
    avg_stay_duration: Decimal  # nights, 1 dp
    active_property_count: int


class OccupationByProperty(BaseModel):
    """Occupancy and revenue of one active property."""

    model_config = ConfigDict(frozen=True)

    property_id: uuid.UUID
    property_name: str
    occupied_nights: int
    available_nights: int
    occupation_rate: int  # percentage 0–100
    revenue: Decimal


class OccupationByMonth(BaseModel):
    """Occupancy and pro-rated revenue for one calendar month of the range."""

    model_config = ConfigDict(frozen=True)

    month: str  # YYYY-MM
    month_label: str
    occupied_nights: int
    total_nights: int
    occupation_rate: int
    revenue: Decimal  # whole currency units


class RevenueByPlatform(BaseModel):
    """Booking count and revenue attributed to one booking channel."""

    model_config = ConfigDict(frozen=True)

    platform: BookingPlatform
    platform_label: str
    count: int
    total_amount: Decimal
    percentage: int


class PortfolioAnalytics(BaseModel):
    """All four reports computed from one snapshot of the store."""

    model_config = ConfigDict(frozen=True)

    period_start: date
    period_end: date
    revenue: RevenueAnalytics
    properties: list[OccupationByProperty]
    months: list[OccupationByMonth]
    platforms: list[RevenueByPlatform]
