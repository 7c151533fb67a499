import logging

from app.exceptions.custom import CouponUnavailableError
from app.schemas.checkout import CheckoutRequest, CheckoutResponse
from app.schemas.payment import PaymentRequest, PaymentStatus
from app.services.coupons import CouponManager
from app.services.payment import PaymentProcessor
from app.services.pricing import PricingEngine
from app.services.reservation import ReservationManager

logger = logging.getLogger(__name__)


class CheckoutService:
    """Price → coupon → reservation → payment → confirmation."""

    def __init__(
        self,
        pricing: PricingEngine,
        reservations: ReservationManager,
        payments: PaymentProcessor,
        coupons: CouponManager,
    ) -> None:
        self._pricing = pricing
        self._reservations = reservations
        self._payments = payments
        self._coupons = coupons

    async def checkout(self, request: CheckoutRequest) -> CheckoutResponse:
        booking = request.booking_request
        pricing = self._pricing.calculate_dynamic_price(
            request.base_price, booking, request.availability,
        )

        # 1. Coupon applies to the final (post-tax) price
        coupon = None
        total = pricing.final_price
        coupon_discount = 0
        if request.coupon_code:
            coupon = self._coupons.validate_coupon(
                request.coupon_code, pricing.final_price, booking.item_type, booking.item_id,
            )
            if coupon.is_valid:
                total = max(pricing.final_price - coupon.discount, 0)
                coupon_discount = pricing.final_price - total
            else:
                logger.info("Coupon %s rejected: %s", request.coupon_code, coupon.message)

        # 2. Reservation is recorded at the discounted total. The coupon
        # discount is folded into `discount`; the breakdown stays the
        # pre-coupon quote, so it sums to final_price + coupon discount.
        reservation = self._reservations.create_reservation(
            booking,
            request.customer_info,
            pricing.model_copy(update={
                "final_price": total,
                "discount": pricing.discount + coupon_discount,
            }),
        )

        # 3. Payment
        payment = await self._payments.process_payment(PaymentRequest(
            reservation_id=reservation.id,
            amount=total,
            currency=pricing.currency,
            method=request.payment_method,
            card_info=request.card_info,
            billing_address=request.billing_address,
        ))

        # 4. Confirm and count the coupon only once money moved
        if payment.success:
            self._reservations.confirm_reservation(reservation, payment)
            if coupon is not None and coupon.is_valid:
                try:
                    self._coupons.redeem(request.coupon_code)
                except CouponUnavailableError as exc:
                    # Another checkout used the last redemption while this payment ran
                    logger.warning(
                        "Coupon %s not counted for %s: %s",
                        request.coupon_code, reservation.id, exc.message,
                    )
        else:
            reservation.payment_info.status = PaymentStatus.failed
            logger.warning(
                "Checkout for %s left pending: %s", reservation.id, payment.error_message,
            )

        return CheckoutResponse(
            pricing=pricing,
            coupon=coupon,
            total_price=total,
            reservation=reservation,
            payment=payment,
        )
