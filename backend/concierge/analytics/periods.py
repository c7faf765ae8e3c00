"""Calendar arithmetic for analytics: night clamping and month bucketing.

Bookings are half-open intervals ``[check_in, check_out)`` measured in
nights. Report ranges are closed ``[start, end]`` calendar days, so the end
of a range is advanced by one day before it is used as an exclusive bound.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

ONE_DAY = timedelta(days=1)


def days_in_range(start: date, end: date) -> int:
    """Number of calendar days covered by ``[start, end]``, at least 1."""
    return max(1, (end - start).days + 1)


def stay_nights(check_in: date, check_out: date) -> int:
    """Full, unclamped length of a stay. Never negative."""
    return max(0, (check_out - check_in).days)


def clamp_nights(check_in: date, check_out: date, range_start: date, range_end: date) -> int:
    """Nights of ``[check_in, check_out)`` that fall inside ``[range_start, range_end]``.

    A stay that checks out on ``range_start`` shares no night with the range.
    """
    effective_start = max(check_in, range_start)
    effective_end = min(check_out, range_end + ONE_DAY)
    return max(0, (effective_end - effective_start).days)


@dataclass(frozen=True)
class MonthBucket:
    """One calendar month of a report range, clamped to the range bounds."""

    year: int
    month: int
    start: date
    end: date

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def days(self) -> int:
        return days_in_range(self.start, self.end)

    def nights_of(self, check_in: date, check_out: date) -> int:
        return clamp_nights(check_in, check_out, self.start, self.end)


def month_buckets(start: date, end: date) -> list[MonthBucket]:
    """Split ``[start, end]`` into chronological calendar-month buckets.

    The first and last buckets are clamped to the range, so a range starting
    on the 20th yields a first bucket covering only the rest of that month.
    """
    buckets: list[MonthBucket] = []
    cursor = start.replace(day=1)
    while cursor <= end:
        last_day = cursor.replace(day=calendar.monthrange(cursor.year, cursor.month)[1])
        buckets.append(
            MonthBucket(
                year=cursor.year,
                month=cursor.month,
                start=max(cursor, start),
                end=min(last_day, end),
            )
        )
        cursor = last_day + ONE_DAY
    return buckets
