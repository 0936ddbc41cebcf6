from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Booking:
    user_id: str
    room_id: str
    check_in_date: date
    check_out_date: date
    guests: int
    total_price: float
    booking_id: str | None = None
