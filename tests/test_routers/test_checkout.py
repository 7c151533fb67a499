"""Integration tests for POST /checkout."""

from datetime import date, datetime, timedelta, timezone

from httpx import AsyncClient


def _body(**overrides):
    body = {
        "base_price": 1500,
        "booking_request": {
            "item_id": "pkg-3",
            "item_type": "package",
            "check_in_date": (date.today() + timedelta(days=60)).isoformat(),
            "adults_count": 4,
            "children_count": 2,
        },
        "customer_info": {
            "first_name": "Mehmet",
            "last_name": "Kaya",
            "email": "mehmet@example.com",
            "phone": "+905550000000",
            "nationality": "TR",
        },
        "payment_method": "credit_card",
        "card_info": {
            "card_number": "4111111111111111",
            "expiry_month": "01",
            "expiry_year": "2031",
            "cvv": "999",
            "card_holder_name": "Mehmet Kaya",
        },
        "billing_address": {"full_name": "Mehmet Kaya", "city": "Izmir"},
    }
    body.update(overrides)
    return body


async def test_checkout_confirms_reservation(client: AsyncClient):
    resp = await client.post("/checkout", json=_body())
    assert resp.status_code == 200

    data = resp.json()
    assert data["payment"]["success"] is True
    assert data["total_price"] == data["pricing"]["final_price"]
    assert data["reservation"]["status"] == "confirmed"
    assert data["pricing"]["factors"]["group_size_multiplier"] == 0.10

    stored = await client.get(f"/reservations/{data['reservation']['id']}")
    assert stored.json()["status"] == "confirmed"


async def test_checkout_applies_coupon(client: AsyncClient):
    from app.main import app
    from app.schemas.coupon import CouponCode, CouponType

    app.state.coupon_manager.add_coupon(CouponCode(
        code="FAMILY250",
        type=CouponType.fixed_amount,
        value=250,
        applicable_categories=["package"],
        valid_from=datetime(2020, 1, 1, tzinfo=timezone.utc),
        valid_until=datetime(2099, 1, 1, tzinfo=timezone.utc),
    ))

    resp = await client.post("/checkout", json=_body(coupon_code="FAMILY250"))
    data = resp.json()
    assert data["coupon"]["is_valid"] is True
    assert data["total_price"] == data["pricing"]["final_price"] - 250
    assert data["payment"]["amount"] == data["total_price"]


async def test_checkout_rejects_invalid_booking(client: AsyncClient):
    body = _body()
    body["booking_request"]["adults_count"] = 0
    resp = await client.post("/checkout", json=body)
    assert resp.status_code == 422
    assert resp.json()["field"] == "adults_count"
