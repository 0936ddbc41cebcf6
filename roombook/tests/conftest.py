from __future__ import annotations

import uuid
from datetime import date

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from roombook.core.entities.booking import Booking
from roombook.core.entities.room import Room
from roombook.core.entities.user import User
from roombook.core.repositories.booking_repository import BookingStore, RoomAlreadyBookedError
from roombook.core.repositories.room_repository import RoomDirectory
from roombook.core.repositories.user_repository import UserDirectory
from roombook.infrastructure.database import Base, build_engine
from roombook.infrastructure.models import models  # noqa: F401  (registers tables on Base.metadata)


class InMemoryUserDirectory(UserDirectory):
    def __init__(self, users: list[User] | None = None) -> None:
        self.users: dict[str, User] = {u.user_id: u for u in users or []}
        self.lookups: list[str] = []

    def find_by_id(self, user_id: str) -> User | None:
        self.lookups.append(user_id)
        return self.users.get(user_id)

    def add(self, user: User) -> User:
        user_id = user.user_id or uuid.uuid4().hex
        stored = User(user_id=user_id, name=user.name, email=user.email)
        self.users[user_id] = stored
        return stored


class InMemoryRoomDirectory(RoomDirectory):
    def __init__(self, rooms: list[Room] | None = None) -> None:
        self.rooms: dict[str, Room] = {r.room_id: r for r in rooms or []}
        self.lookups: list[str] = []

    def find_by_id(self, room_id: str) -> Room | None:
        self.lookups.append(room_id)
        return self.rooms.get(room_id)

    def add(self, room: Room) -> Room:
        room_id = room.room_id or uuid.uuid4().hex
        stored = Room(room_id=room_id, name=room.name, capacity=room.capacity, price_per_night=room.price_per_night)
        self.rooms[room_id] = stored
        return stored


def _overlaps(booking: Booking, check_in_date: date, check_out_date: date) -> bool:
    return booking.check_in_date <= check_out_date and booking.check_out_date >= check_in_date


class InMemoryBookingStore(BookingStore):
    """Append-only list of bookings, with the same overlap rule as the SQL store."""

    def __init__(self) -> None:
        self.bookings: list[Booking] = []
        self.overlap_queries: int = 0

    def get(self, booking_id: str) -> Booking | None:
        return next((b for b in self.bookings if b.booking_id == booking_id), None)

    def find_overlapping(self, room_id: str, check_in_date: date, check_out_date: date) -> Booking | None:
        self.overlap_queries += 1
        return next(
            (b for b in self.bookings if b.room_id == room_id and _overlaps(b, check_in_date, check_out_date)),
            None,
        )

    def create(self, booking: Booking) -> Booking:
        for b in self.bookings:
            if b.room_id == booking.room_id and _overlaps(b, booking.check_in_date, booking.check_out_date):
                raise RoomAlreadyBookedError(f"room {booking.room_id} already booked by {b.booking_id}")

        stored = Booking(
            booking_id=f"bkg-{len(self.bookings) + 1}",
            user_id=booking.user_id,
            room_id=booking.room_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            guests=booking.guests,
            total_price=booking.total_price,
        )
        self.bookings.append(stored)
        return stored


@pytest.fixture()
def user_directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory([User(user_id="u1", name="Ada", email="ada@example.com")])


@pytest.fixture()
def room_directory() -> InMemoryRoomDirectory:
    return InMemoryRoomDirectory([Room(room_id="r1", name="Sea view", capacity=2, price_per_night=125.0)])


@pytest.fixture()
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture()
def engine() -> Engine:
    """
    Private in-memory SQLite database per test, independent from the app's SessionLocal.
    """
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db(engine: Engine) -> Session:
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
