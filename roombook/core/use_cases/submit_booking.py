from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from roombook.core.entities.booking import Booking
from roombook.core.repositories.booking_repository import (
    BookingRejectedError,
    BookingStore,
    RoomAlreadyBookedError,
)
from roombook.core.repositories.identifiers import InvalidIdentifierError
from roombook.core.repositories.room_repository import RoomDirectory
from roombook.core.repositories.user_repository import UserDirectory

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found!"
ROOM_NOT_FOUND = "Room not found!"
ROOM_UNAVAILABLE = "Room already booked for selected dates!"


class NotFoundError(Exception):
    """Raise to map to HTTP 404 (user or room does not resolve)."""


class ConflictError(Exception):
    """Raise to map to HTTP 400 (room already booked for the requested dates)."""


class ValidationError(Exception):
    """Raise to map to HTTP 400 (malformed identifier, or record refused by the booking store)."""


@dataclass(frozen=True, slots=True)
class SubmitBookingCommand:
    user_id: str
    room_id: str
    check_in_date: date
    check_out_date: date
    guests: int
    total_price: float


class SubmitBookingUseCase:
    """
    Admission check for a new reservation.

    Runs strictly in order and stops at the first failure:
      1. the user must exist
      2. the room must exist
      3. no booking of the room may overlap the requested dates (inclusive bounds)
      4. the booking is persisted and returned with its store-assigned id

    Nothing is written unless every check passes.
    """

    def __init__(
            self,
            *,
            user_directory: UserDirectory,
            room_directory: RoomDirectory,
            booking_store: BookingStore,
    ) -> None:
        self._user_directory = user_directory
        self._room_directory = room_directory
        self._booking_store = booking_store

    def execute(self, command: SubmitBookingCommand) -> Booking:
        try:
            user = self._user_directory.find_by_id(command.user_id)
            room = None if user is None else self._room_directory.find_by_id(command.room_id)
        except InvalidIdentifierError as e:
            logger.info("Booking refused: %s", e)
            raise ValidationError(str(e)) from e

        if user is None:
            logger.info("Booking refused: unknown user %s", command.user_id)
            raise NotFoundError(USER_NOT_FOUND)

        if room is None:
            logger.info("Booking refused: unknown room %s", command.room_id)
            raise NotFoundError(ROOM_NOT_FOUND)

        existing = self._booking_store.find_overlapping(
            command.room_id, command.check_in_date, command.check_out_date
        )
        if existing is not None:
            logger.info(
                "Booking refused: room %s already booked %s..%s (booking %s)",
                command.room_id,
                existing.check_in_date,
                existing.check_out_date,
                existing.booking_id,
            )
            raise ConflictError(ROOM_UNAVAILABLE)

        booking = Booking(
            user_id=command.user_id,
            room_id=command.room_id,
            check_in_date=command.check_in_date,
            check_out_date=command.check_out_date,
            guests=command.guests,
            total_price=command.total_price,
        )

        try:
            created = self._booking_store.create(booking)
        except RoomAlreadyBookedError as e:
            # another request won the room between the lookup and the insert
            logger.warning("Booking refused at insert time for room %s: %s", command.room_id, e)
            raise ConflictError(ROOM_UNAVAILABLE) from e
        except BookingRejectedError as e:
            raise ValidationError(str(e)) from e

        logger.info(
            "Room %s booked %s..%s for user %s (booking %s)",
            created.room_id,
            created.check_in_date,
            created.check_out_date,
            created.user_id,
            created.booking_id,
        )
        return created
