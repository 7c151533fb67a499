from datetime import datetime

from pydantic import BaseModel

from app.schemas.booking import AvailabilityData, BookingRequest


class PricingFactors(BaseModel):
    season_multiplier: float
    demand_multiplier: float
    advance_booking_discount: float
    group_size_multiplier: float
    day_of_week_multiplier: float
    weather_impact: float
    special_event_multiplier: float
    availability_scarcity: float


class PriceBreakdown(BaseModel):
    base_price: float
    seasonal_adjustment: int
    demand_adjustment: int
    advance_booking_discount: int
    group_discount: int
    weekend_surcharge: int
    taxes: int
    service_fee: int

    def total(self) -> float:
        return (
            self.base_price
            + self.seasonal_adjustment
            + self.demand_adjustment
            - self.advance_booking_discount
            - self.group_discount
            + self.weekend_surcharge
            + self.taxes
            + self.service_fee
        )


class PricingResult(BaseModel):
    base_price: float
    final_price: int
    discount: int
    factors: PricingFactors
    breakdown: PriceBreakdown
    currency: str
    valid_until: datetime


class QuoteRequest(BaseModel):
    base_price: float
    booking_request: BookingRequest
    availability: AvailabilityData | None = None
