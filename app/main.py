import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    CouponNotFoundError,
    CouponUnavailableError,
    InvalidBookingError,
    ReservationNotFoundError,
    ReservationStateError,
)
from app.exceptions.handlers import (
    coupon_not_found_handler,
    coupon_unavailable_handler,
    invalid_booking_error_handler,
    reservation_not_found_handler,
    reservation_state_error_handler,
)
from app.routers.checkout import router as checkout_router
from app.routers.coupons import router as coupons_router
from app.routers.payments import router as payments_router
from app.routers.pricing import router as pricing_router
from app.routers.reservations import router as reservations_router
from app.services.checkout import CheckoutService
from app.services.coupons import CouponManager
from app.services.payment import PaymentProcessor
from app.services.pricing import PricingEngine
from app.services.reservation import ReservationManager
from app.store import ReservationStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    pricing = PricingEngine(
        currency=settings.currency,
        tax_rate=settings.tax_rate,
        service_fee_rate=settings.service_fee_rate,
        service_fee_cap=settings.service_fee_cap,
        validity_hours=settings.quote_validity_hours,
        holiday_country=settings.event_holiday_country,
    )
    reservations = ReservationManager(ReservationStore(settings.max_reservations))
    payments = PaymentProcessor(
        currency=settings.currency,
        success_rate=settings.payment_success_rate,
    )
    coupons = CouponManager()

    app.state.pricing_engine = pricing
    app.state.reservation_manager = reservations
    app.state.payment_processor = payments
    app.state.coupon_manager = coupons
    app.state.checkout_service = CheckoutService(pricing, reservations, payments, coupons)

    yield


app = FastAPI(title="Travel Pricing Engine", lifespan=lifespan)

app.add_exception_handler(InvalidBookingError, invalid_booking_error_handler)
app.add_exception_handler(ReservationNotFoundError, reservation_not_found_handler)
app.add_exception_handler(ReservationStateError, reservation_state_error_handler)
app.add_exception_handler(CouponNotFoundError, coupon_not_found_handler)
app.add_exception_handler(CouponUnavailableError, coupon_unavailable_handler)

app.include_router(pricing_router)
app.include_router(reservations_router)
app.include_router(payments_router)
app.include_router(coupons_router)
app.include_router(checkout_router)
