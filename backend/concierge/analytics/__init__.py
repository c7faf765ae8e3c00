"""Occupancy and revenue analytics engine."""

from concierge.analytics.exceptions import AnalyticsStoreError
from concierge.analytics.service import AnalyticsService
from concierge.analytics.store import AnalyticsStore, SQLAlchemyAnalyticsStore

__all__ = [
    "AnalyticsService",
    "AnalyticsStore",
    "AnalyticsStoreError",
    "SQLAlchemyAnalyticsStore",
]
