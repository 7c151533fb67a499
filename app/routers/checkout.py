from fastapi import APIRouter

from app.dependencies import CheckoutDep
from app.schemas.checkout import CheckoutRequest, CheckoutResponse

router = APIRouter(tags=["checkout"])


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout(request: CheckoutRequest, service: CheckoutDep) -> CheckoutResponse:
    return await service.checkout(request)
