"""Tests for analytics endpoints."""

import uuid
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import AsyncClient

from concierge.analytics import AnalyticsService, AnalyticsStoreError
from concierge.api.deps import get_analytics_service
from concierge.main import app
from concierge.models.enums import PropertyStatus

pytestmark = pytest.mark.asyncio


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _params(organisation_id: uuid.UUID, start: str = "2025-01-01", end: str = "2025-01-31") -> dict:
    return {"start_date": start, "end_date": end, "organisation_id": str(organisation_id)}


@pytest_asyncio.fixture
async def january_villa(add_property, add_booking):
    """One active villa with a 5-night, 500 booking in January 2025."""
    villa = await add_property("Villa Corniche")
    await add_property("Loft Belle de Mai", status=PropertyStatus.INACTIVE)
    await add_booking(villa, date(2025, 1, 10), date(2025, 1, 15), Decimal("500"), platform="airbnb")
    return villa


# ---------------------------------------------------------------------------
# GET /api/v1/analytics/*
# ---------------------------------------------------------------------------


class TestRevenueEndpoint:
    async def test_revenue_analytics(self, client: AsyncClient, january_villa, organisation_id) -> None:
        response = await client.get("/api/v1/analytics/revenue", params=_params(organisation_id))
        assert response.status_code == 200
        data = response.json()

        assert Decimal(data["rev_par"]) == Decimal("16.13")
        assert Decimal(data["adr"]) == Decimal("100.00")
        assert Decimal(data["avg_stay_duration"]) == Decimal("5.0")
        assert data["active_property_count"] == 1

    async def test_other_organisation_sees_nothing(self, client: AsyncClient, january_villa) -> None:
        response = await client.get("/api/v1/analytics/revenue", params=_params(uuid.uuid4()))
        assert response.status_code == 200
        data = response.json()
        assert data["active_property_count"] == 0
        assert Decimal(data["adr"]) == 0


class TestOccupancyEndpoints:
    async def test_by_property(self, client: AsyncClient, january_villa, organisation_id) -> None:
        response = await client.get("/api/v1/analytics/occupancy/properties", params=_params(organisation_id))
        assert response.status_code == 200
        data = response.json()

        assert len(data) == 1
        assert data[0]["property_id"] == str(january_villa.id)
        assert data[0]["property_name"] == "Villa Corniche"
        assert data[0]["occupied_nights"] == 5
        assert data[0]["available_nights"] == 31
        assert data[0]["occupation_rate"] == 16

    async def test_by_month_splits_cross_month_booking(
        self, client: AsyncClient, add_property, add_booking, organisation_id
    ) -> None:
        villa = await add_property()
        await add_booking(villa, date(2025, 1, 30), date(2025, 2, 3), Decimal("400"))

        response = await client.get(
            "/api/v1/analytics/occupancy/months",
            params=_params(organisation_id, end="2025-02-28"),
        )
        assert response.status_code == 200
        data = response.json()

        assert [row["month"] for row in data] == ["2025-01", "2025-02"]
        assert [row["month_label"] for row in data] == ["Janvier 2025", "Février 2025"]
        assert [row["occupied_nights"] for row in data] == [2, 2]
        assert [Decimal(row["revenue"]) for row in data] == [Decimal("200"), Decimal("200")]

    async def test_single_day_range_is_valid(self, client: AsyncClient, january_villa, organisation_id) -> None:
        response = await client.get(
            "/api/v1/analytics/occupancy/months",
            params=_params(organisation_id, start="2025-01-12", end="2025-01-12"),
        )
        assert response.status_code == 200
        (row,) = response.json()
        assert row["occupied_nights"] == 1
        assert row["total_nights"] == 1
        assert row["occupation_rate"] == 100


class TestPlatformEndpoint:
    async def test_lists_every_platform(self, client: AsyncClient, january_villa, organisation_id) -> None:
        response = await client.get("/api/v1/analytics/revenue/platforms", params=_params(organisation_id))
        assert response.status_code == 200
        data = response.json()

        assert [row["platform"] for row in data][0] == "airbnb"
        assert {row["platform"] for row in data} == {"airbnb", "booking", "direct", "other"}
        assert data[0]["percentage"] == 100
        assert sum(row["percentage"] for row in data) == 100


class TestSummaryEndpoint:
    async def test_summary(self, client: AsyncClient, january_villa, organisation_id) -> None:
        response = await client.get("/api/v1/analytics/summary", params=_params(organisation_id))
        assert response.status_code == 200
        data = response.json()

        assert data["period_start"] == "2025-01-01"
        assert data["period_end"] == "2025-01-31"
        assert data["revenue"]["active_property_count"] == 1
        assert len(data["properties"]) == 1
        assert len(data["months"]) == 1
        assert len(data["platforms"]) == 4


class TestValidation:
    async def test_end_before_start(self, client: AsyncClient, organisation_id) -> None:
        response = await client.get(
            "/api/v1/analytics/revenue",
            params=_params(organisation_id, start="2025-01-31", end="2025-01-01"),
        )
        assert response.status_code == 400
        assert "end_date" in response.json()["detail"]

    async def test_missing_params(self, client: AsyncClient, organisation_id) -> None:
        response = await client.get("/api/v1/analytics/revenue", params={"start_date": "2025-01-01"})
        assert response.status_code == 422

        response = await client.get(
            "/api/v1/analytics/revenue",
            params={"start_date": "2025-01-01", "end_date": "2025-01-31"},
        )
        assert response.status_code == 422

    async def test_invalid_organisation_id(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/analytics/revenue",
            params={"start_date": "2025-01-01", "end_date": "2025-01-31", "organisation_id": "not-a-uuid"},
        )
        assert response.status_code == 422


class TestStoreUnavailable:
    async def test_store_error_returns_503(self, client: AsyncClient, fake_store_cls, organisation_id) -> None:
        store = fake_store_cls(error=AnalyticsStoreError("Could not load bookings"))
        app.dependency_overrides[get_analytics_service] = lambda: AnalyticsService(store)

        response = await client.get("/api/v1/analytics/occupancy/months", params=_params(organisation_id))
        assert response.status_code == 503
        assert response.json()["detail"] == "Analytics store unavailable"


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
