from datetime import date, datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import PaymentDep, ReservationDep
from app.schemas.reservation import (
    CancellationOutcome,
    ReservationCreateRequest,
    ReservationData,
)

router = APIRouter(prefix="/reservations", tags=["reservations"])


class CancellationFeeResponse(BaseModel):
    reservation_id: str
    cancellation_date: date
    fee: int
    currency: str


class CancelRequest(BaseModel):
    cancellation_date: date | None = None
    reason: str = "Customer cancellation"


@router.post("", response_model=ReservationData, status_code=201)
async def create_reservation(
    request: ReservationCreateRequest, manager: ReservationDep,
) -> ReservationData:
    return manager.create_reservation(
        request.booking_request, request.customer_info, request.pricing_result,
    )


@router.get("/by-code/{confirmation_code}", response_model=ReservationData)
async def get_reservation_by_code(confirmation_code: str, manager: ReservationDep) -> ReservationData:
    return manager.get_by_confirmation_code(confirmation_code)


@router.get("/{reservation_id}", response_model=ReservationData)
async def get_reservation(reservation_id: str, manager: ReservationDep) -> ReservationData:
    return manager.get_reservation(reservation_id)


@router.get("/{reservation_id}/cancellation-fee", response_model=CancellationFeeResponse)
async def get_cancellation_fee(
    reservation_id: str,
    manager: ReservationDep,
    cancellation_date: date | None = None,
) -> CancellationFeeResponse:
    reservation = manager.get_reservation(reservation_id)
    on = cancellation_date or datetime.now(timezone.utc).date()
    return CancellationFeeResponse(
        reservation_id=reservation.id,
        cancellation_date=on,
        fee=manager.calculate_cancellation_fee(reservation, on),
        currency=reservation.payment_info.currency,
    )


@router.post("/{reservation_id}/cancel", response_model=CancellationOutcome)
async def cancel_reservation(
    reservation_id: str,
    manager: ReservationDep,
    payments: PaymentDep,
    request: CancelRequest | None = None,
) -> CancellationOutcome:
    request = request or CancelRequest()
    reservation = manager.get_reservation(reservation_id)
    outcome = manager.cancel_reservation(reservation, request.cancellation_date)

    txn_id = reservation.payment_info.transaction_id
    if outcome.refundable_amount > 0 and txn_id:
        outcome.refund = await payments.refund_payment(
            txn_id, outcome.refundable_amount, request.reason,
        )
    return outcome
