from datetime import date
from enum import StrEnum

from pydantic import BaseModel


class ItemType(StrEnum):
    tour = "tour"
    hotel = "hotel"
    package = "package"


class BookingRequest(BaseModel):
    item_id: str
    item_type: ItemType
    check_in_date: date
    check_out_date: date | None = None
    adults_count: int
    children_count: int = 0
    room_type: str | None = None
    special_requests: list[str] = []

    @property
    def total_guests(self) -> int:
        return self.adults_count + self.children_count


class AvailabilityData(BaseModel):
    available: int | None = None  # free spots; defaults to 10 when unknown
    capacity: int | None = None  # total spots; defaults to 20 when unknown
