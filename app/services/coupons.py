import logging
from datetime import datetime, timezone

from app.exceptions.custom import CouponNotFoundError, CouponUnavailableError
from app.rules.money import round_half_up
from app.schemas.coupon import CouponCode, CouponType, CouponValidation

logger = logging.getLogger(__name__)

MSG_INVALID = "Kupon kodu geçersiz"
MSG_EXPIRED = "Kupon kodu süresi dolmuş"
MSG_LIMIT = "Kupon kullanım limiti aşıldı"
MSG_MIN_AMOUNT = "Minimum {amount} TL tutarında rezervasyon gerekli"
MSG_ITEM = "Kupon bu ürün için geçerli değil"
MSG_CATEGORY = "Kupon bu kategori için geçerli değil"
MSG_APPLIED = "{code} kuponu uygulandı - {discount} TL indirim"


def _utc(year: int, month: int, day: int, end_of_day: bool = False) -> datetime:
    if end_of_day:
        return datetime(year, month, day, 23, 59, 59, tzinfo=timezone.utc)
    return datetime(year, month, day, tzinfo=timezone.utc)


def default_coupons() -> list[CouponCode]:
    return [
        CouponCode(
            code="WELCOME10",
            type=CouponType.percentage,
            value=10,
            min_amount=500,
            valid_from=_utc(2024, 1, 1),
            valid_until=_utc(2024, 12, 31, end_of_day=True),
            usage_limit=1000,
        ),
        CouponCode(
            code="EARLYBIRD",
            type=CouponType.percentage,
            value=20,
            min_amount=1000,
            max_discount=500,
            valid_from=_utc(2024, 1, 1),
            valid_until=_utc(2024, 6, 30, end_of_day=True),
            usage_limit=500,
        ),
        CouponCode(
            code="SUMMER2024",
            type=CouponType.fixed_amount,
            value=200,
            min_amount=800,
            valid_from=_utc(2024, 6, 1),
            valid_until=_utc(2024, 8, 31, end_of_day=True),
            applicable_categories=["tour"],
        ),
    ]


def _fmt_amount(amount: float) -> str:
    # Whole amounts print without decimals or exponent: 1000000, not 1e+06
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def _reject(message: str) -> CouponValidation:
    return CouponValidation(is_valid=False, discount=0, message=message)


class CouponManager:
    """In-memory coupon table.

    Codes are case-sensitive. Usage counters live in this process only.
    """

    def __init__(self, coupons: list[CouponCode] | None = None) -> None:
        if coupons is None:
            coupons = default_coupons()
        self._coupons: dict[str, CouponCode] = {c.code: c for c in coupons}

    def get_coupon(self, code: str) -> CouponCode | None:
        return self._coupons.get(code)

    def add_coupon(self, coupon: CouponCode) -> None:
        """Add or replace a coupon by code."""
        self._coupons[coupon.code] = coupon

    def validate_coupon(
        self,
        coupon_code: str,
        booking_amount: float,
        item_type: str,
        item_id: str | None = None,
        now: datetime | None = None,
    ) -> CouponValidation:
        coupon = self._coupons.get(coupon_code)
        if coupon is None:
            return _reject(MSG_INVALID)

        if now is None:
            now = datetime.now(timezone.utc)

        if now < coupon.valid_from or now > coupon.valid_until:
            return _reject(MSG_EXPIRED)

        if coupon.usage_limit is not None and coupon.used_count >= coupon.usage_limit:
            return _reject(MSG_LIMIT)

        if coupon.min_amount is not None and booking_amount < coupon.min_amount:
            return _reject(MSG_MIN_AMOUNT.format(amount=_fmt_amount(coupon.min_amount)))

        if coupon.applicable_items and item_id and item_id not in coupon.applicable_items:
            return _reject(MSG_ITEM)

        if coupon.applicable_categories and item_type not in coupon.applicable_categories:
            return _reject(MSG_CATEGORY)

        discount = round_half_up(self._compute_discount(coupon, booking_amount))
        return CouponValidation(
            is_valid=True,
            discount=discount,
            message=MSG_APPLIED.format(code=coupon.code, discount=discount),
        )

    @staticmethod
    def _compute_discount(coupon: CouponCode, booking_amount: float) -> float:
        if coupon.type == CouponType.fixed_amount:
            return coupon.value
        discount = booking_amount * (coupon.value / 100)
        if coupon.max_discount is not None and discount > coupon.max_discount:
            discount = coupon.max_discount
        return discount

    def redeem(self, coupon_code: str, now: datetime | None = None) -> CouponCode:
        """Count one use of *coupon_code*.

        Raises CouponUnavailableError outside the validity window or once the
        usage limit is reached, so the counter never passes the limit.
        """
        coupon = self._coupons.get(coupon_code)
        if coupon is None:
            raise CouponNotFoundError(coupon_code)

        if now is None:
            now = datetime.now(timezone.utc)
        if now < coupon.valid_from or now > coupon.valid_until:
            raise CouponUnavailableError(coupon.code, MSG_EXPIRED)
        if coupon.usage_limit is not None and coupon.used_count >= coupon.usage_limit:
            raise CouponUnavailableError(coupon.code, MSG_LIMIT)

        coupon.used_count += 1
        logger.info(
            "Coupon %s redeemed (%d/%s)",
            coupon.code, coupon.used_count, coupon.usage_limit or "unlimited",
        )
        return coupon
