import logging
import random
from datetime import datetime, timezone

from app.exceptions.custom import PaymentError
from app.rules import identifiers
from app.schemas.payment import PaymentMethod, PaymentRequest, PaymentResult

logger = logging.getLogger(__name__)

MIN_CARD_NUMBER_LENGTH = 13
MIN_CVV_LENGTH = 3


class PaymentProcessor:
    """Simulated payment gateway.

    No real provider is called: approval is a random draw against
    ``success_rate``. Errors are returned as ``success=False`` results.
    """

    def __init__(
        self,
        currency: str = "TRY",
        success_rate: float = 0.95,
        rng: random.Random | None = None,
    ) -> None:
        self._currency = currency
        self._success_rate = success_rate
        self._rng = rng or random.Random()

    async def process_payment(self, request: PaymentRequest) -> PaymentResult:
        try:
            if not self.validate_payment_request(request):
                raise PaymentError("Invalid payment request")

            if self._rng.random() >= self._success_rate:
                raise PaymentError("Payment failed - insufficient funds or invalid card")

            txn_id = identifiers.transaction_id()
            logger.info(
                "Payment approved for %s: %s %s (txn=%s)",
                request.reservation_id, request.amount, request.currency, txn_id,
            )
            return PaymentResult(
                success=True,
                transaction_id=txn_id,
                payment_method=request.method.value,
                amount=request.amount,
                currency=request.currency,
                processed_at=datetime.now(timezone.utc),
                provider_response={
                    "status": "approved",
                    "auth_code": identifiers.auth_code(),
                },
            )
        except PaymentError as exc:
            logger.warning("Payment for %s failed: %s", request.reservation_id, exc.message)
            return PaymentResult(
                success=False,
                error_message=exc.message,
                payment_method=request.method.value,
                amount=request.amount,
                currency=request.currency,
                processed_at=datetime.now(timezone.utc),
            )

    @staticmethod
    def validate_payment_request(request: PaymentRequest) -> bool:
        if not request.amount or request.amount <= 0:
            return False
        if not request.currency or len(request.currency) != 3:
            return False
        billing = request.billing_address
        if not billing.full_name or not billing.city:
            return False

        card = request.card_info
        if request.method == PaymentMethod.credit_card and card is not None:
            if len(card.card_number) < MIN_CARD_NUMBER_LENGTH:
                return False
            if len(card.cvv) < MIN_CVV_LENGTH:
                return False
            if not card.card_holder_name:
                return False

        return True

    async def refund_payment(self, transaction_id: str, amount: float, reason: str) -> PaymentResult:
        """Refund *amount* of a transaction. The result carries a negative amount."""
        refund_txn = identifiers.refund_id()
        logger.info("Refund %s issued for %s: %s (%s)", refund_txn, transaction_id, amount, reason)
        return PaymentResult(
            success=True,
            transaction_id=refund_txn,
            payment_method="refund",
            amount=-amount,
            currency=self._currency,
            processed_at=datetime.now(timezone.utc),
            provider_response={
                "status": "refunded",
                "original_transaction": transaction_id,
                "reason": reason,
            },
        )
