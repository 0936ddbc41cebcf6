from __future__ import annotations

from sqlalchemy.orm import Session

from roombook.core.entities.booking import Booking as CoreBooking
from roombook.core.use_cases.get_booking import GetBookingUseCase
from roombook.core.use_cases.register_directory_entry import RegisterRoomUseCase, RegisterUserUseCase
from roombook.core.use_cases.submit_booking import SubmitBookingCommand, SubmitBookingUseCase
from roombook.infrastructure.repositories.booking_repository_impl import BookingStoreImpl
from roombook.infrastructure.repositories.room_repository_impl import RoomDirectoryImpl
from roombook.infrastructure.repositories.user_repository_impl import UserDirectoryImpl
from roombook.schemas.models import (
    Booking,
    BookingCreated,
    BookingRequest,
    Room,
    RoomCreated,
    RoomRequest,
    User,
    UserCreated,
    UserRequest,
)


def _to_schema_booking(booking: CoreBooking) -> Booking:
    """
    Translate core Booking entity -> API schema Booking.
    """
    return Booking(
        id=booking.booking_id,
        user_id=booking.user_id,
        room_id=booking.room_id,
        check_in_date=booking.check_in_date,
        check_out_date=booking.check_out_date,
        guests=booking.guests,
        total_price=booking.total_price,
    )


def submit_booking_service(body: BookingRequest, db: Session) -> BookingCreated:
    use_case = SubmitBookingUseCase(
        user_directory=UserDirectoryImpl(db),
        room_directory=RoomDirectoryImpl(db),
        booking_store=BookingStoreImpl(db),
    )

    booking = use_case.execute(
        SubmitBookingCommand(
            user_id=body.user_id,
            room_id=body.room_id,
            check_in_date=body.check_in_date,
            check_out_date=body.check_out_date,
            guests=body.guests,
            total_price=body.total_price,
        )
    )

    return BookingCreated(message="Room booked successfully!", booking=_to_schema_booking(booking))


def get_booking_service(booking_id: str, db: Session) -> Booking:
    use_case = GetBookingUseCase(booking_store=BookingStoreImpl(db))
    return _to_schema_booking(use_case.execute(booking_id=booking_id))


def register_user_service(body: UserRequest, db: Session) -> UserCreated:
    use_case = RegisterUserUseCase(user_directory=UserDirectoryImpl(db))
    user = use_case.execute(name=body.name, email=body.email)

    return UserCreated(
        message="User registered successfully!",
        user=User(id=user.user_id, name=user.name, email=user.email),
    )


def register_room_service(body: RoomRequest, db: Session) -> RoomCreated:
    use_case = RegisterRoomUseCase(room_directory=RoomDirectoryImpl(db))
    room = use_case.execute(name=body.name, capacity=body.capacity, price_per_night=body.price_per_night)

    return RoomCreated(
        message="Room created successfully!",
        room=Room(id=room.room_id, name=room.name, capacity=room.capacity, price_per_night=room.price_per_night),
    )
