from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from roombook.core.entities.booking import Booking


class RoomAlreadyBookedError(Exception):
    """The store refused an insert that would overlap an existing booking of the same room."""


class BookingRejectedError(Exception):
    """The store refused the record itself (constraint violation, bad column value...)."""


class BookingStore(ABC):
    """
    Repository interface for Booking persistence. Records are append-only.

    Two bookings of the same room overlap when
    `a.check_in_date <= b.check_out_date and a.check_out_date >= b.check_in_date`.
    Both bounds are inclusive, so a stay that starts on the day another one ends is a clash.
    """

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        """Raises InvalidIdentifierError if booking_id is not a valid id."""
        raise NotImplementedError

    @abstractmethod
    def find_overlapping(self, room_id: str, check_in_date: date, check_out_date: date) -> Booking | None:
        """Return any booking of `room_id` overlapping [check_in_date, check_out_date], or None."""
        raise NotImplementedError

    @abstractmethod
    def create(self, booking: Booking) -> Booking:
        """
        Persist a new booking and return it with its store-assigned booking_id.

        Implementations must refuse the insert with RoomAlreadyBookedError when an overlapping
        booking of the same room exists at insert time.
        """
        raise NotImplementedError
