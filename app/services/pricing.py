import logging
import math
import random
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

from app.exceptions.custom import InvalidBookingError
from app.rules import pricing_factors as rules
from app.rules.money import round_half_up
from app.schemas.booking import AvailabilityData, BookingRequest
from app.schemas.pricing import PriceBreakdown, PricingFactors, PricingResult

logger = logging.getLogger(__name__)

# Largest accepted base price
MAX_BASE_PRICE = 1_000_000_000

# (check-in date, availability) → occupancy rate in [0, 1]
DemandSignal = Callable[[date, AvailabilityData | None], float]


def random_demand_signal(_check_in: date, _availability: AvailabilityData | None) -> float:
    """Placeholder occupancy until a real occupancy feed exists."""
    return random.random()


class PricingEngine:
    def __init__(
        self,
        currency: str = "TRY",
        tax_rate: float = 0.18,
        service_fee_rate: float = 0.03,
        service_fee_cap: float = 100.0,
        validity_hours: int = 24,
        holiday_country: str | None = None,
        demand_signal: DemandSignal | None = None,
    ) -> None:
        self._currency = currency
        self._tax_rate = tax_rate
        self._service_fee_rate = service_fee_rate
        self._service_fee_cap = service_fee_cap
        self._validity = timedelta(hours=validity_hours)
        self._holiday_country = holiday_country or None
        self._demand_signal = demand_signal or random_demand_signal

    def calculate_dynamic_price(
        self,
        base_price: float,
        booking_request: BookingRequest,
        availability: AvailabilityData | None = None,
        now: datetime | None = None,
    ) -> PricingResult:
        """Price a booking: factors → rounded breakdown → final price.

        The quote is valid for ``validity_hours`` from *now*.
        """
        self._validate(base_price, booking_request)
        if now is None:
            now = datetime.now(timezone.utc)

        factors = self.calculate_factors(booking_request, availability, now.date())
        breakdown = self._calculate_breakdown(base_price, factors)
        final_price = round_half_up(breakdown.total())
        discount = breakdown.advance_booking_discount + breakdown.group_discount

        logger.debug(
            "Priced %s %s: base=%s final=%s discount=%s",
            booking_request.item_type, booking_request.item_id,
            base_price, final_price, discount,
        )

        return PricingResult(
            base_price=base_price,
            final_price=final_price,
            discount=discount,
            factors=factors,
            breakdown=breakdown,
            currency=self._currency,
            valid_until=now + self._validity,
        )

    def calculate_factors(
        self,
        booking_request: BookingRequest,
        availability: AvailabilityData | None,
        today: date,
    ) -> PricingFactors:
        check_in = booking_request.check_in_date
        occupancy = self._demand_signal(check_in, availability)

        return PricingFactors(
            season_multiplier=rules.season_multiplier(check_in),
            demand_multiplier=rules.demand_multiplier(occupancy),
            advance_booking_discount=rules.advance_booking_discount(check_in, today),
            group_size_multiplier=rules.group_size_discount(booking_request.total_guests),
            day_of_week_multiplier=rules.day_of_week_multiplier(check_in),
            weather_impact=rules.weather_impact(check_in, booking_request.item_type),
            special_event_multiplier=rules.special_event_multiplier(
                check_in, self._holiday_country,
            ),
            availability_scarcity=rules.availability_scarcity(availability),
        )

    def _calculate_breakdown(self, base_price: float, factors: PricingFactors) -> PriceBreakdown:
        seasonal = base_price * (factors.season_multiplier - 1)
        demand = base_price * (factors.demand_multiplier - 1)
        advance = base_price * factors.advance_booking_discount
        group = base_price * factors.group_size_multiplier
        weekend = base_price * (factors.day_of_week_multiplier - 1)

        # Discounts do not reduce the taxable subtotal
        subtotal = base_price + seasonal + demand + weekend
        taxes = subtotal * self._tax_rate
        service_fee = min(subtotal * self._service_fee_rate, self._service_fee_cap)

        return PriceBreakdown(
            base_price=base_price,
            seasonal_adjustment=round_half_up(seasonal),
            demand_adjustment=round_half_up(demand),
            advance_booking_discount=round_half_up(advance),
            group_discount=round_half_up(group),
            weekend_surcharge=round_half_up(weekend),
            taxes=round_half_up(taxes),
            service_fee=round_half_up(service_fee),
        )

    @staticmethod
    def _validate(base_price: float, booking_request: BookingRequest) -> None:
        if not math.isfinite(base_price) or base_price > MAX_BASE_PRICE:
            raise InvalidBookingError(
                f"Base price must be a finite amount up to {MAX_BASE_PRICE}", field="base_price",
            )
        if base_price <= 0:
            raise InvalidBookingError("Base price must be positive", field="base_price")
        if booking_request.adults_count < 1:
            raise InvalidBookingError("At least one adult is required", field="adults_count")
        if booking_request.children_count < 0:
            raise InvalidBookingError(
                "Children count cannot be negative", field="children_count",
            )
        check_out = booking_request.check_out_date
        if check_out is not None and check_out < booking_request.check_in_date:
            raise InvalidBookingError(
                "Check-out date cannot precede check-in date", field="check_out_date",
            )
