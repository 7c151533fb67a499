"""Pure functions for the individual dynamic-pricing factors.

No I/O, no side effects. Uses holidays (pip) for the optional national
event calendar.
"""

from datetime import date

import holidays

from app.schemas.booking import AvailabilityData, ItemType

# Month (1-12) → seasonal multiplier
SEASON_MULTIPLIERS: dict[int, float] = {
    6: 1.3, 7: 1.3, 8: 1.3, 12: 1.3, 1: 1.3, 2: 1.3,
    3: 1.1, 4: 1.1, 5: 1.1, 9: 1.1, 10: 1.1, 11: 1.1,
}
OFF_SEASON_MULTIPLIER = 0.9

# (occupancy strictly above, multiplier), checked in order
DEMAND_TIERS: list[tuple[float, float]] = [
    (0.9, 1.4),
    (0.7, 1.2),
    (0.5, 1.1),
]

# (minimum lead days, discount rate), checked in order
ADVANCE_BOOKING_DISCOUNTS: list[tuple[int, float]] = [
    (90, 0.25),
    (60, 0.20),
    (30, 0.15),
    (14, 0.10),
    (7, 0.05),
]

# (minimum party size, discount rate), checked in order
GROUP_SIZE_DISCOUNTS: list[tuple[int, float]] = [
    (10, 0.15),
    (6, 0.10),
    (4, 0.05),
]

WEEKEND_DAYS = {4, 5, 6}  # Fri, Sat, Sun (date.weekday())
WEEKEND_MULTIPLIER = 1.2

# (month, day) of fixed event days: New Year, 23 April, 29 October
SPECIAL_EVENT_DAYS = {(1, 1), (4, 23), (10, 29)}
SPECIAL_EVENT_MULTIPLIER = 1.5

SCARCITY_TIERS: list[tuple[float, float]] = [
    (0.95, 1.3),
    (0.85, 1.2),
    (0.7, 1.1),
]
DEFAULT_AVAILABLE = 10
DEFAULT_CAPACITY = 20


def season_multiplier(check_in: date) -> float:
    return SEASON_MULTIPLIERS.get(check_in.month, OFF_SEASON_MULTIPLIER)


def demand_multiplier(occupancy_rate: float) -> float:
    """Map an occupancy rate (0..1) to a demand multiplier."""
    for threshold, multiplier in DEMAND_TIERS:
        if occupancy_rate > threshold:
            return multiplier
    return 1.0


def days_in_advance(check_in: date, today: date) -> int:
    return (check_in - today).days


def advance_booking_discount(check_in: date, today: date) -> float:
    """Discount rate for booking *check_in* on *today*.

    Bookings made less than 7 days ahead (or for a past date) get nothing.
    """
    lead = days_in_advance(check_in, today)
    for min_days, discount in ADVANCE_BOOKING_DISCOUNTS:
        if lead >= min_days:
            return discount
    return 0.0


def group_size_discount(group_size: int) -> float:
    for min_size, discount in GROUP_SIZE_DISCOUNTS:
        if group_size >= min_size:
            return discount
    return 0.0


def day_of_week_multiplier(check_in: date) -> float:
    if check_in.weekday() in WEEKEND_DAYS:
        return WEEKEND_MULTIPLIER
    return 1.0


def weather_impact(check_in: date, item_type: ItemType | str) -> float:
    # February tours run at a 10% discount
    if item_type == ItemType.tour and check_in.month == 2:
        return 0.9
    return 1.0


def is_special_event(day: date, holiday_country: str | None = None) -> bool:
    """Fixed event days, plus public holidays of *holiday_country* when given."""
    if (day.month, day.day) in SPECIAL_EVENT_DAYS:
        return True
    if holiday_country:
        year_holidays = holidays.country_holidays(holiday_country, years=day.year)
        return day in year_holidays
    return False


def special_event_multiplier(day: date, holiday_country: str | None = None) -> float:
    if is_special_event(day, holiday_country):
        return SPECIAL_EVENT_MULTIPLIER
    return 1.0


def occupancy_from_availability(availability: AvailabilityData) -> float:
    available = availability.available
    if available is None:
        available = DEFAULT_AVAILABLE
    capacity = availability.capacity or DEFAULT_CAPACITY
    return 1 - (available / capacity)


def availability_scarcity(availability: AvailabilityData | None) -> float:
    if availability is None:
        return 1.0

    occupancy = occupancy_from_availability(availability)
    for threshold, multiplier in SCARCITY_TIERS:
        if occupancy > threshold:
            return multiplier
    return 1.0
