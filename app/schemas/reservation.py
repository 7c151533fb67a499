from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel

from app.schemas.booking import BookingRequest
from app.schemas.payment import PaymentMethod, PaymentResult, PaymentStatus
from app.schemas.pricing import PricingResult


class ReservationStatus(StrEnum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class CustomerInfo(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    nationality: str
    passport_number: str | None = None
    special_requirements: list[str] = []


class PaymentInfo(BaseModel):
    method: PaymentMethod
    status: PaymentStatus
    transaction_id: str | None = None
    amount: float
    currency: str
    payment_date: datetime | None = None


class CancellationFee(BaseModel):
    days: int
    fee_percentage: int


class CancellationPolicy(BaseModel):
    free_cancellation_until: date
    cancellation_fees: list[CancellationFee]


class ReservationData(BaseModel):
    id: str
    user_id: str = ""
    booking_request: BookingRequest
    pricing_result: PricingResult
    customer_info: CustomerInfo
    payment_info: PaymentInfo
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime
    confirmation_code: str
    cancellation_policy: CancellationPolicy


class ReservationCreateRequest(BaseModel):
    booking_request: BookingRequest
    customer_info: CustomerInfo
    pricing_result: PricingResult


class CancellationOutcome(BaseModel):
    reservation_id: str
    status: ReservationStatus
    cancellation_fee: int
    refundable_amount: float
    currency: str
    refund: PaymentResult | None = None
