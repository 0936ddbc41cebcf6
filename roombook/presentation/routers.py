from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from roombook.infrastructure.database import SessionLocal
from roombook.services.booking_service import (
    get_booking_service,
    register_room_service,
    register_user_service,
    submit_booking_service,
)
from roombook.schemas.models import (
    Booking,
    BookingCreated,
    BookingRequest,
    Message,
    RoomCreated,
    RoomRequest,
    UserCreated,
    UserRequest,
)
from roombook.core.repositories.identifiers import InvalidIdentifierError
from roombook.core.use_cases.get_booking import NotFoundError as BookingNotFoundError
from roombook.core.use_cases.submit_booking import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _message(status_code: int, error: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": str(error)})


@router.post(
    "/bookings",
    response_model=BookingCreated,
    status_code=201,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
def post_bookings(body: BookingRequest, db: Session = Depends(get_db)):
    """
    Book a room

    Returns:
      - 201 with the persisted booking
      - 404 if the user or the room does not exist
      - 400 if the room is already booked for overlapping dates, or on any other failure
    """
    try:
        return submit_booking_service(body, db)
    except NotFoundError as e:
        return _message(404, e)
    except (ConflictError, ValidationError) as e:
        return _message(400, e)
    except Exception as e:
        logger.exception("Booking request for room %s failed", body.room_id)
        return _message(400, e)


@router.get(
    "/bookings/{booking_id}",
    response_model=Booking,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
def get_bookings_booking_id(booking_id: str, db: Session = Depends(get_db)):
    """
    Get a booking
    """
    try:
        return get_booking_service(booking_id, db)
    except BookingNotFoundError as e:
        return _message(404, e)
    except InvalidIdentifierError as e:
        return _message(400, e)


@router.post("/users", response_model=UserCreated, status_code=201, responses={400: {"model": Message}})
def post_users(body: UserRequest, db: Session = Depends(get_db)):
    """
    Register a user
    """
    try:
        return register_user_service(body, db)
    except Exception as e:
        logger.exception("User registration failed")
        return _message(400, e)


@router.post("/rooms", response_model=RoomCreated, status_code=201, responses={400: {"model": Message}})
def post_rooms(body: RoomRequest, db: Session = Depends(get_db)):
    """
    Register a room
    """
    try:
        return register_room_service(body, db)
    except Exception as e:
        logger.exception("Room registration failed")
        return _message(400, e)
