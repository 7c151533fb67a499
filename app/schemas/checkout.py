from pydantic import BaseModel

from app.schemas.booking import AvailabilityData, BookingRequest
from app.schemas.coupon import CouponValidation
from app.schemas.payment import BillingAddress, CardInfo, PaymentMethod, PaymentResult
from app.schemas.pricing import PricingResult
from app.schemas.reservation import CustomerInfo, ReservationData


class CheckoutRequest(BaseModel):
    base_price: float
    booking_request: BookingRequest
    availability: AvailabilityData | None = None
    customer_info: CustomerInfo
    coupon_code: str | None = None
    payment_method: PaymentMethod = PaymentMethod.credit_card
    card_info: CardInfo | None = None
    billing_address: BillingAddress


class CheckoutResponse(BaseModel):
    pricing: PricingResult  # quote before any coupon
    coupon: CouponValidation | None = None
    total_price: int
    reservation: ReservationData
    payment: PaymentResult
