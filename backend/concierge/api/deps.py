"""Shared API dependencies: single import point for all routers.

Routers import what they need from here::

    from concierge.api.deps import get_analytics_service
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from concierge.analytics import AnalyticsService, SQLAlchemyAnalyticsStore
from concierge.config import settings
from concierge.database import get_session_factory


def get_analytics_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AnalyticsService:
    """Build an analytics service over the application database."""
    return AnalyticsService(SQLAlchemyAnalyticsStore(session_factory), locale=settings.report_locale)


__all__ = [
    "get_analytics_service",
    "get_session_factory",
]
