import logging
from datetime import date, datetime, timezone

from app.exceptions.custom import ReservationNotFoundError, ReservationStateError
from app.rules import identifiers
from app.rules.cancellation import build_cancellation_policy, cancellation_fee
from app.schemas.booking import BookingRequest
from app.schemas.payment import PaymentMethod, PaymentResult, PaymentStatus
from app.schemas.pricing import PricingResult
from app.schemas.reservation import (
    CancellationOutcome,
    CustomerInfo,
    PaymentInfo,
    ReservationData,
    ReservationStatus,
)
from app.store import ReservationStore

logger = logging.getLogger(__name__)


class ReservationManager:
    def __init__(self, store: ReservationStore) -> None:
        self._store = store

    @staticmethod
    def generate_confirmation_code() -> str:
        return identifiers.confirmation_code()

    def create_reservation(
        self,
        booking_request: BookingRequest,
        customer_info: CustomerInfo,
        pricing_result: PricingResult,
        now: datetime | None = None,
    ) -> ReservationData:
        if now is None:
            now = datetime.now(timezone.utc)

        reservation = ReservationData(
            id=identifiers.reservation_id(),
            user_id="",
            booking_request=booking_request,
            pricing_result=pricing_result,
            customer_info=customer_info,
            payment_info=PaymentInfo(
                method=PaymentMethod.credit_card,
                status=PaymentStatus.pending,
                amount=pricing_result.final_price,
                currency=pricing_result.currency,
            ),
            status=ReservationStatus.pending,
            created_at=now,
            updated_at=now,
            confirmation_code=self.generate_confirmation_code(),
            cancellation_policy=build_cancellation_policy(
                booking_request.check_in_date, booking_request.item_type,
            ),
        )
        self._store.save(reservation)
        logger.info(
            "Reservation %s created (%s, item=%s, amount=%s %s)",
            reservation.id, reservation.confirmation_code,
            booking_request.item_id, pricing_result.final_price, pricing_result.currency,
        )
        return reservation

    def get_reservation(self, reservation_id: str) -> ReservationData:
        reservation = self._store.get(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def get_by_confirmation_code(self, code: str) -> ReservationData:
        reservation = self._store.find_by_confirmation_code(code)
        if reservation is None:
            raise ReservationNotFoundError(code)
        return reservation

    @staticmethod
    def calculate_cancellation_fee(
        reservation: ReservationData, cancellation_date: date | None = None,
    ) -> int:
        """Fee owed if *reservation* is cancelled on *cancellation_date* (default today, UTC)."""
        if cancellation_date is None:
            cancellation_date = datetime.now(timezone.utc).date()
        return cancellation_fee(
            reservation.pricing_result.final_price,
            reservation.cancellation_policy,
            reservation.booking_request.check_in_date,
            cancellation_date,
        )

    @staticmethod
    def check_payment_matches(reservation: ReservationData, amount: float, currency: str) -> None:
        """Raise unless *amount* and *currency* settle the reservation exactly."""
        expected = reservation.payment_info
        if amount != expected.amount or currency != expected.currency:
            raise ReservationStateError(
                f"Payment of {amount} {currency} does not match reservation "
                f"{reservation.id} ({expected.amount} {expected.currency})",
                status=reservation.status,
            )

    def confirm_reservation(
        self, reservation: ReservationData, payment_result: PaymentResult,
    ) -> ReservationData:
        if reservation.status != ReservationStatus.pending:
            raise ReservationStateError(
                f"Only pending reservations can be confirmed (status={reservation.status})",
                status=reservation.status,
            )
        if not payment_result.success:
            raise ReservationStateError("Cannot confirm with a failed payment", status=reservation.status)
        self.check_payment_matches(reservation, payment_result.amount, payment_result.currency)

        reservation.payment_info.status = PaymentStatus.completed
        reservation.payment_info.transaction_id = payment_result.transaction_id
        reservation.payment_info.payment_date = payment_result.processed_at
        if payment_result.payment_method in {m.value for m in PaymentMethod}:
            reservation.payment_info.method = PaymentMethod(payment_result.payment_method)
        reservation.status = ReservationStatus.confirmed
        reservation.updated_at = datetime.now(timezone.utc)
        logger.info("Reservation %s confirmed (txn=%s)", reservation.id, payment_result.transaction_id)
        return reservation

    def cancel_reservation(
        self, reservation: ReservationData, cancellation_date: date | None = None,
    ) -> CancellationOutcome:
        if reservation.status in (ReservationStatus.cancelled, ReservationStatus.completed):
            raise ReservationStateError(
                f"Reservation {reservation.id} is already {reservation.status}",
                status=reservation.status,
            )

        fee = self.calculate_cancellation_fee(reservation, cancellation_date)
        paid = reservation.payment_info.status == PaymentStatus.completed
        refundable = max(reservation.payment_info.amount - fee, 0) if paid else 0

        reservation.status = ReservationStatus.cancelled
        reservation.updated_at = datetime.now(timezone.utc)
        logger.info(
            "Reservation %s cancelled (fee=%s, refundable=%s)", reservation.id, fee, refundable,
        )

        return CancellationOutcome(
            reservation_id=reservation.id,
            status=reservation.status,
            cancellation_fee=fee,
            refundable_amount=refundable,
            currency=reservation.payment_info.currency,
        )
