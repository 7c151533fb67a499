from fastapi import APIRouter

from app.dependencies import PricingDep
from app.schemas.pricing import PricingResult, QuoteRequest

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.post("/quote", response_model=PricingResult)
async def quote(request: QuoteRequest, engine: PricingDep) -> PricingResult:
    return engine.calculate_dynamic_price(
        request.base_price, request.booking_request, request.availability,
    )
