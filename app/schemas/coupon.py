from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class CouponType(StrEnum):
    percentage = "percentage"
    fixed_amount = "fixed_amount"


class CouponCode(BaseModel):
    code: str
    type: CouponType
    value: float
    min_amount: float | None = None
    max_discount: float | None = None
    valid_from: datetime
    valid_until: datetime
    usage_limit: int | None = None
    used_count: int = 0
    applicable_items: list[str] | None = None
    applicable_categories: list[str] | None = None


class CouponValidation(BaseModel):
    is_valid: bool
    discount: int
    message: str


class CouponValidateRequest(BaseModel):
    code: str
    booking_amount: float
    item_type: str
    item_id: str | None = None
