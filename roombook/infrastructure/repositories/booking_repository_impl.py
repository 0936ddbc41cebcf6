from __future__ import annotations

import threading
from contextlib import nullcontext
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from roombook.core.entities.booking import Booking
from roombook.core.repositories.booking_repository import (
    BookingRejectedError,
    BookingStore,
    RoomAlreadyBookedError,
)
from roombook.core.repositories.identifiers import require_identifier
from roombook.infrastructure.models.models import BookingModel, RoomModel

# SQLite has no row locks; every check-and-insert in the process goes through this one.
_SQLITE_WRITE_LOCK = threading.Lock()


class BookingStoreImpl(BookingStore):
    """
    SQLAlchemy implementation of the booking store.

    `create` repeats the overlap check and inserts in one transaction. On backends with row locks
    the room row is taken with SELECT ... FOR UPDATE first; on SQLite, where that compiles away,
    the whole check-insert-commit runs under a process-wide lock instead.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, booking_id: str) -> Booking | None:
        row = self._db.get(BookingModel, require_identifier(booking_id, kind="booking"))
        if row is None:
            return None
        return self._to_entity(row)

    def find_overlapping(self, room_id: str, check_in_date: date, check_out_date: date) -> Booking | None:
        row = self._overlapping(room_id, check_in_date, check_out_date).first()
        if row is None:
            return None
        return self._to_entity(row)

    def create(self, booking: Booking) -> Booking:
        with self._write_guard():
            try:
                self._db.query(RoomModel.room_id).filter(RoomModel.room_id == booking.room_id).with_for_update().first()

                clash = self._overlapping(booking.room_id, booking.check_in_date, booking.check_out_date).first()
                if clash is not None:
                    self._db.rollback()
                    raise RoomAlreadyBookedError(
                        f"room {booking.room_id} already booked by {clash.booking_id}"
                    )

                row = BookingModel(
                    user_id=booking.user_id,
                    room_id=booking.room_id,
                    check_in_date=booking.check_in_date,
                    check_out_date=booking.check_out_date,
                    guests=booking.guests,
                    total_price=booking.total_price,
                )
                self._db.add(row)
                self._db.commit()
            except SQLAlchemyError as e:
                self._db.rollback()
                raise BookingRejectedError(str(getattr(e, "orig", None) or e)) from e

            return self._to_entity(row)

    def _write_guard(self):
        if self._db.get_bind().dialect.name == "sqlite":
            return _SQLITE_WRITE_LOCK
        return nullcontext()

    def _overlapping(self, room_id: str, check_in_date: date, check_out_date: date) -> Query:
        # inclusive on both ends, see BookingStore
        return (
            self._db.query(BookingModel)
            .filter(BookingModel.room_id == room_id)
            .filter(BookingModel.check_in_date <= check_out_date)
            .filter(BookingModel.check_out_date >= check_in_date)
            .order_by(BookingModel.check_in_date)
        )

    @staticmethod
    def _to_entity(row: BookingModel) -> Booking:
        return Booking(
            booking_id=row.booking_id,
            user_id=row.user_id,
            room_id=row.room_id,
            check_in_date=row.check_in_date,
            check_out_date=row.check_out_date,
            guests=row.guests,
            total_price=row.total_price,
        )
