from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Room:
    """
    Bookable room. Capacity and nightly price are informational only, admission never checks them.
    """
    room_id: str
    name: str = ""
    capacity: int = 0
    price_per_night: float = 0.0
