"""Tests for ReservationStore, including eviction."""

from datetime import date, datetime, timedelta, timezone

from app.schemas.booking import BookingRequest, ItemType
from app.schemas.payment import PaymentMethod, PaymentStatus
from app.schemas.pricing import PriceBreakdown, PricingFactors, PricingResult
from app.schemas.reservation import (
    CancellationPolicy,
    CustomerInfo,
    PaymentInfo,
    ReservationData,
    ReservationStatus,
)
from app.store import ReservationStore

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _reservation(res_id, status=ReservationStatus.pending, minutes=0, code=None):
    created = T0 + timedelta(minutes=minutes)
    return ReservationData(
        id=res_id,
        booking_request=BookingRequest(
            item_id="h-1", item_type=ItemType.hotel, check_in_date=date(2025, 2, 1), adults_count=1,
        ),
        pricing_result=PricingResult(
            base_price=100,
            final_price=100,
            discount=0,
            factors=PricingFactors(
                season_multiplier=1, demand_multiplier=1, advance_booking_discount=0,
                group_size_multiplier=0, day_of_week_multiplier=1, weather_impact=1,
                special_event_multiplier=1, availability_scarcity=1,
            ),
            breakdown=PriceBreakdown(
                base_price=100, seasonal_adjustment=0, demand_adjustment=0,
                advance_booking_discount=0, group_discount=0, weekend_surcharge=0,
                taxes=0, service_fee=0,
            ),
            currency="TRY",
            valid_until=created,
        ),
        customer_info=CustomerInfo(
            first_name="A", last_name="B", email="a@b.c", phone="1", nationality="TR",
        ),
        payment_info=PaymentInfo(
            method=PaymentMethod.credit_card, status=PaymentStatus.pending, amount=100, currency="TRY",
        ),
        status=status,
        created_at=created,
        updated_at=created,
        confirmation_code=code or f"TA-{res_id}",
        cancellation_policy=CancellationPolicy(
            free_cancellation_until=date(2025, 1, 29), cancellation_fees=[],
        ),
    )


def test_save_and_get():
    store = ReservationStore()
    reservation = store.save(_reservation("R1"))
    assert store.get("R1") is reservation
    assert store.get("R2") is None
    assert len(store) == 1


def test_find_by_confirmation_code():
    store = ReservationStore()
    store.save(_reservation("R1", code="TA-XYZ-0001"))
    assert store.find_by_confirmation_code("TA-XYZ-0001").id == "R1"
    assert store.find_by_confirmation_code("TA-NOPE") is None


def test_evicts_oldest_closed_first():
    store = ReservationStore(max_reservations=2)
    store.save(_reservation("OLD_CANCELLED", ReservationStatus.cancelled, minutes=0))
    store.save(_reservation("ACTIVE", ReservationStatus.confirmed, minutes=1))
    store.save(_reservation("NEW", minutes=2))

    assert store.get("OLD_CANCELLED") is None
    assert store.get("ACTIVE") is not None
    assert store.get("NEW") is not None


def test_open_reservations_never_evicted():
    store = ReservationStore(max_reservations=1)
    store.save(_reservation("R1", minutes=0))
    store.save(_reservation("R2", minutes=1))
    assert len(store) == 2
