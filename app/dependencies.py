from typing import Annotated

from fastapi import Depends, Request

from app.services.checkout import CheckoutService
from app.services.coupons import CouponManager
from app.services.payment import PaymentProcessor
from app.services.pricing import PricingEngine
from app.services.reservation import ReservationManager


def get_pricing_engine(request: Request) -> PricingEngine:
    return request.app.state.pricing_engine


def get_reservation_manager(request: Request) -> ReservationManager:
    return request.app.state.reservation_manager


def get_payment_processor(request: Request) -> PaymentProcessor:
    return request.app.state.payment_processor


def get_coupon_manager(request: Request) -> CouponManager:
    return request.app.state.coupon_manager


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


PricingDep = Annotated[PricingEngine, Depends(get_pricing_engine)]
ReservationDep = Annotated[ReservationManager, Depends(get_reservation_manager)]
PaymentDep = Annotated[PaymentProcessor, Depends(get_payment_processor)]
CouponDep = Annotated[CouponManager, Depends(get_coupon_manager)]
CheckoutDep = Annotated[CheckoutService, Depends(get_checkout_service)]
