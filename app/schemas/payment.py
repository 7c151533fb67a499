from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class PaymentMethod(StrEnum):
    credit_card = "credit_card"
    bank_transfer = "bank_transfer"
    paypal = "paypal"
    crypto = "crypto"


class PaymentStatus(StrEnum):
    pending = "pending"
    completed = "completed"
    failed = "failed"
    refunded = "refunded"


class CardInfo(BaseModel):
    card_number: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    cvv: str = ""
    card_holder_name: str = ""


class BillingAddress(BaseModel):
    full_name: str = ""
    address_line1: str = ""
    address_line2: str | None = None
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


class PaymentRequest(BaseModel):
    # No field validation here: PaymentProcessor reports bad input as a failed result.
    reservation_id: str
    amount: float
    currency: str
    method: PaymentMethod
    card_info: CardInfo | None = None
    billing_address: BillingAddress


class PaymentResult(BaseModel):
    success: bool
    transaction_id: str | None = None
    error_message: str | None = None
    payment_method: str  # a PaymentMethod value, or "refund"
    amount: float
    currency: str
    processed_at: datetime
    provider_response: dict | None = None


class RefundRequest(BaseModel):
    transaction_id: str
    amount: float
    reason: str
