"""Portfolio analytics MCP tool: RevPAR, occupancy, and revenue breakdowns."""

import logging
import uuid
from datetime import date, timedelta

from concierge.analytics import AnalyticsService, AnalyticsStoreError, SQLAlchemyAnalyticsStore
from concierge.config import settings
from concierge.mcp import get_session_factory, mcp

logger = logging.getLogger(__name__)

VALID_METRICS = ("summary", "revenue", "properties", "months", "platforms")


@mcp.tool()
async def portfolio_analytics(
    organisation_id: str,
    period_start: str | None = None,
    period_end: str | None = None,
    metric: str = "summary",
) -> dict:
    """Analyze an organisation's occupancy and revenue over a date range.

    Args:
        organisation_id: UUID of the organisation to report on
        period_start: First day of the report (YYYY-MM-DD, defaults to 30 days before period_end)
        period_end: Last day of the report, inclusive (YYYY-MM-DD, defaults to today)
        metric: "summary" (all), "revenue" (RevPAR/ADR/average stay),
            "properties" (occupancy per property), "months" (occupancy per month),
            or "platforms" (revenue per booking channel)

    Returns:
        Dict with the requested report, or an "error" key describing the problem.
    """
    if metric not in VALID_METRICS:
        return {"error": f"Invalid metric '{metric}'. Must be one of: {', '.join(sorted(VALID_METRICS))}"}

    try:
        org_id = uuid.UUID(organisation_id)
    except ValueError:
        return {"error": f"Invalid organisation_id '{organisation_id}'."}

    try:
        p_end = date.fromisoformat(period_end) if period_end else date.today()
        p_start = (
            date.fromisoformat(period_start)
            if period_start
            else p_end - timedelta(days=settings.default_range_days - 1)
        )
    except ValueError as e:
        return {"error": f"Invalid date format: {e}"}

    if p_end < p_start:
        return {"error": "period_end must not be before period_start."}

    service = AnalyticsService(SQLAlchemyAnalyticsStore(get_session_factory()), locale=settings.report_locale)
    period = {"start": p_start.isoformat(), "end": p_end.isoformat()}

    try:
        if metric == "summary":
            report = await service.portfolio(p_start, p_end, org_id)
            return report.model_dump(mode="json")
        if metric == "revenue":
            revenue = await service.revenue_analytics(p_start, p_end, org_id)
            return {"period": period, "revenue": revenue.model_dump(mode="json")}
        if metric == "properties":
            rows = await service.occupation_by_property(p_start, p_end, org_id)
        elif metric == "months":
            rows = await service.occupation_by_month(p_start, p_end, org_id)
        else:
            rows = await service.revenue_by_platform(p_start, p_end, org_id)
        return {"period": period, metric: [row.model_dump(mode="json") for row in rows]}
    except AnalyticsStoreError as e:
        logger.exception("portfolio_analytics failed")
        return {"error": str(e)}
