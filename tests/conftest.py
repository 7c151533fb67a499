from datetime import date, datetime, timezone
from unittest.mock import patch

import httpx
import pytest
from httpx import ASGITransport

from app.schemas.booking import BookingRequest, ItemType
from app.schemas.reservation import CustomerInfo


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("CURRENCY", "TRY")
    monkeypatch.setenv("PAYMENT_SUCCESS_RATE", "1.0")
    monkeypatch.setenv("EVENT_HOLIDAY_COUNTRY", "")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    # Lowest demand tier so quotes are deterministic
    async with lifespan(app):
        with patch("app.services.pricing.random.random", return_value=0.0):
            async with httpx.AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as c:
                yield c


@pytest.fixture
def now():
    return datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def booking_request():
    return BookingRequest(
        item_id="tour-123",
        item_type=ItemType.tour,
        check_in_date=date(2025, 7, 15),  # Tuesday, high season
        adults_count=2,
        children_count=0,
    )


@pytest.fixture
def customer_info():
    return CustomerInfo(
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        phone="+905551234567",
        nationality="TR",
    )
