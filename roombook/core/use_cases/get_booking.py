from __future__ import annotations

from roombook.core.entities.booking import Booking
from roombook.core.repositories.booking_repository import BookingStore


class NotFoundError(Exception):
    """Raise to map to HTTP 404."""


class GetBookingUseCase:
    """
    Lookup by id. A malformed booking_id propagates the store's InvalidIdentifierError (HTTP 400).
    """

    def __init__(self, *, booking_store: BookingStore) -> None:
        self._booking_store = booking_store

    def execute(self, *, booking_id: str) -> Booking:
        booking = self._booking_store.get(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found!")
        return booking
