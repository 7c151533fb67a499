import logging

from fastapi import APIRouter

from app.dependencies import PaymentDep, ReservationDep
from app.exceptions.custom import ReservationNotFoundError
from app.schemas.payment import PaymentRequest, PaymentResult, RefundRequest
from app.schemas.reservation import ReservationStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("", response_model=PaymentResult)
async def process_payment(
    request: PaymentRequest,
    processor: PaymentDep,
    reservations: ReservationDep,
) -> PaymentResult:
    # Confirm a known pending reservation; unknown ids are plain charges
    try:
        reservation = reservations.get_reservation(request.reservation_id)
    except ReservationNotFoundError:
        logger.info("Payment for %s has no stored reservation", request.reservation_id)
        reservation = None

    pending = reservation is not None and reservation.status == ReservationStatus.pending
    if pending:
        # Amount and currency must match the reservation before any charge
        reservations.check_payment_matches(reservation, request.amount, request.currency)

    result = await processor.process_payment(request)
    if result.success and pending:
        reservations.confirm_reservation(reservation, result)
    return result


@router.post("/refund", response_model=PaymentResult)
async def refund_payment(request: RefundRequest, processor: PaymentDep) -> PaymentResult:
    return await processor.refund_payment(request.transaction_id, request.amount, request.reason)
