"""Integration tests for POST /pricing/quote."""

from datetime import date, timedelta

from httpx import AsyncClient


def _booking(check_in: date, **overrides):
    body = {
        "item_id": "tour-123",
        "item_type": "tour",
        "check_in_date": check_in.isoformat(),
        "adults_count": 2,
        "children_count": 0,
    }
    body.update(overrides)
    return body


async def test_quote(client: AsyncClient):
    check_in = date.today() + timedelta(days=100)
    resp = await client.post("/pricing/quote", json={
        "base_price": 1000,
        "booking_request": _booking(check_in),
    })
    assert resp.status_code == 200

    data = resp.json()
    assert data["base_price"] == 1000
    assert data["currency"] == "TRY"
    assert data["factors"]["demand_multiplier"] == 1.0
    assert data["factors"]["advance_booking_discount"] == 0.25
    assert data["breakdown"]["advance_booking_discount"] == 250

    b = data["breakdown"]
    total = (
        b["base_price"] + b["seasonal_adjustment"] + b["demand_adjustment"]
        - b["advance_booking_discount"] - b["group_discount"]
        + b["weekend_surcharge"] + b["taxes"] + b["service_fee"]
    )
    assert total == data["final_price"]


async def test_quote_with_availability(client: AsyncClient):
    resp = await client.post("/pricing/quote", json={
        "base_price": 500,
        "booking_request": _booking(date.today() + timedelta(days=3)),
        "availability": {"available": 1, "capacity": 40},
    })
    assert resp.status_code == 200
    assert resp.json()["factors"]["availability_scarcity"] == 1.3


async def test_quote_rejects_non_positive_price(client: AsyncClient):
    resp = await client.post("/pricing/quote", json={
        "base_price": 0,
        "booking_request": _booking(date.today()),
    })
    assert resp.status_code == 422
    assert resp.json() == {"detail": "Base price must be positive", "field": "base_price"}


async def test_quote_rejects_check_out_before_check_in(client: AsyncClient):
    check_in = date.today() + timedelta(days=10)
    resp = await client.post("/pricing/quote", json={
        "base_price": 100,
        "booking_request": _booking(
            check_in, check_out_date=(check_in - timedelta(days=1)).isoformat(),
        ),
    })
    assert resp.status_code == 422
    assert resp.json()["field"] == "check_out_date"


async def test_quote_rejects_unknown_item_type(client: AsyncClient):
    resp = await client.post("/pricing/quote", json={
        "base_price": 100,
        "booking_request": _booking(date.today(), item_type="spaceship"),
    })
    assert resp.status_code == 422


async def test_quote_rejects_overflowing_base_price(client: AsyncClient):
    resp = await client.post("/pricing/quote", json={
        "base_price": 1e308,
        "booking_request": _booking(date.today() + timedelta(days=10)),
    })
    assert resp.status_code == 422
    assert resp.json()["field"] == "base_price"
