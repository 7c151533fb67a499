from fastapi import APIRouter

from app.dependencies import CouponDep
from app.schemas.coupon import CouponCode, CouponValidateRequest, CouponValidation

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.post("/validate", response_model=CouponValidation)
async def validate_coupon(request: CouponValidateRequest, manager: CouponDep) -> CouponValidation:
    return manager.validate_coupon(
        request.code, request.booking_amount, request.item_type, request.item_id,
    )


@router.post("/{code}/redeem", response_model=CouponCode)
async def redeem_coupon(code: str, manager: CouponDep) -> CouponCode:
    return manager.redeem(code)
