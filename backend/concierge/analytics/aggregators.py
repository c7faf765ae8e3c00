"""Pure aggregations over fetched properties and bookings.

Each function is independent: it takes the records of one fetch and the
report range and returns fresh result objects. Intermediate sums stay
unrounded; rounding happens only when a result object is built.
"""

import uuid
from collections import defaultdict
from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from concierge.analytics.labels import DEFAULT_LOCALE, month_label, platform_label
from concierge.analytics.periods import clamp_nights, days_in_range, month_buckets, stay_nights
from concierge.analytics.records import ZERO, BookingRecord, PropertyRecord
from concierge.models.enums import BookingPlatform
from concierge.schemas.analytics import (
    OccupationByMonth,
    OccupationByProperty,
    RevenueAnalytics,
    RevenueByPlatform,
)

CENT = Decimal("0.01")
TENTH = Decimal("0.1")
UNIT = Decimal("1")


def _round(value: Decimal, step: Decimal) -> Decimal:
    return value.quantize(step, rounding=ROUND_HALF_UP)


def _ratio(numerator: Decimal | int, denominator: Decimal | int) -> Decimal:
    if not denominator:
        return ZERO
    return Decimal(numerator) / Decimal(denominator)


def _percentage(part: Decimal | int, whole: Decimal | int) -> int:
    """Whole-number percentage, 0 when ``whole`` is zero."""
    return int(_round(_ratio(part, whole) * 100, UNIT))


def compute_revenue_analytics(
    properties: Sequence[PropertyRecord],
    bookings: Sequence[BookingRecord],
    start: date,
    end: date,
) -> RevenueAnalytics:
    """RevPAR, ADR, and average stay length over ``[start, end]``.

    Revenue is every fetched booking's full amount. Occupied nights are
    clamped to the range, while the average stay uses the unclamped length.
    """
    active_count = len(properties)
    total_revenue = ZERO
    occupied_nights = 0
    stay_total = 0

    for booking in bookings:
        total_revenue += booking.amount
        occupied_nights += clamp_nights(booking.check_in, booking.check_out, start, end)
        stay_total += stay_nights(booking.check_in, booking.check_out)

    return RevenueAnalytics(
        rev_par=_round(_ratio(total_revenue, active_count * days_in_range(start, end)), CENT),
        adr=_round(_ratio(total_revenue, occupied_nights), CENT),
        avg_stay_duration=_round(_ratio(stay_total, len(bookings)), TENTH),
        active_property_count=active_count,
    )


def compute_occupation_by_property(
    properties: Sequence[PropertyRecord],
    bookings: Sequence[BookingRecord],
    start: date,
    end: date,
) -> list[OccupationByProperty]:
    """One row per active property, busiest first.

    Properties without bookings are included with zero values. Bookings for
    properties outside the active set are ignored.
    """
    available = days_in_range(start, end)
    nights: dict[uuid.UUID | None, int] = defaultdict(int)
    revenue: dict[uuid.UUID | None, Decimal] = defaultdict(lambda: ZERO)

    for booking in bookings:
        nights[booking.property_id] += clamp_nights(booking.check_in, booking.check_out, start, end)
        revenue[booking.property_id] += booking.amount

    rows = [
        OccupationByProperty(
            property_id=prop.id,
            property_name=prop.name,
            occupied_nights=nights[prop.id],
            available_nights=available,
            occupation_rate=_percentage(nights[prop.id], available),
            revenue=_round(revenue[prop.id], CENT),
        )
        for prop in properties
    ]
    rows.sort(key=lambda row: row.occupation_rate, reverse=True)
    return rows


def compute_occupation_by_month(
    properties: Sequence[PropertyRecord],
    bookings: Sequence[BookingRecord],
    start: date,
    end: date,
    locale: str = DEFAULT_LOCALE,
) -> list[OccupationByMonth]:
    """One row per calendar month intersecting ``[start, end]``, in order.

    A booking spanning several months contributes to each month the share of
    its amount matching the share of its nights spent there.
    """
    active_count = len(properties)
    rows: list[OccupationByMonth] = []

    for bucket in month_buckets(start, end):
        occupied = 0
        revenue = ZERO
        for booking in bookings:
            overlap = bucket.nights_of(booking.check_in, booking.check_out)
            if overlap <= 0:
                continue
            occupied += overlap
            full_nights = max(1, stay_nights(booking.check_in, booking.check_out))
            revenue += booking.amount * overlap / full_nights

        total_nights = bucket.days * active_count
        rows.append(
            OccupationByMonth(
                month=bucket.key,
                month_label=month_label(bucket.year, bucket.month, locale),
                occupied_nights=occupied,
                total_nights=total_nights,
                occupation_rate=_percentage(occupied, total_nights),
                revenue=_round(revenue, UNIT),
            )
        )
    return rows


def compute_revenue_by_platform(
    bookings: Sequence[BookingRecord],
    locale: str = DEFAULT_LOCALE,
) -> list[RevenueByPlatform]:
    """Full booking amounts grouped by channel, largest first.

    Every platform is listed, including those without bookings. Amounts are
    not pro-rated: a booking that touches the range counts in full.
    """
    counts: dict[BookingPlatform, int] = defaultdict(int)
    totals: dict[BookingPlatform, Decimal] = defaultdict(lambda: ZERO)
    grand_total = ZERO

    for booking in bookings:
        counts[booking.platform] += 1
        totals[booking.platform] += booking.amount
        grand_total += booking.amount

    rows = [
        RevenueByPlatform(
            platform=platform,
            platform_label=platform_label(platform, locale),
            count=counts[platform],
            total_amount=_round(totals[platform], CENT),
            percentage=_percentage(totals[platform], grand_total),
        )
        for platform in BookingPlatform
    ]
    rows.sort(key=lambda row: row.total_amount, reverse=True)
    return rows
