from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BookingRequest(_CamelModel):
    user_id: str = Field(alias="userId")
    room_id: str = Field(alias="roomId")
    check_in_date: date = Field(alias="checkInDate")
    check_out_date: date = Field(alias="checkOutDate")
    guests: int
    total_price: float = Field(alias="totalPrice")


class Booking(_CamelModel):
    id: str
    user_id: str = Field(alias="userId")
    room_id: str = Field(alias="roomId")
    check_in_date: date = Field(alias="checkInDate")
    check_out_date: date = Field(alias="checkOutDate")
    guests: int
    total_price: float = Field(alias="totalPrice")


class BookingCreated(BaseModel):
    message: str
    booking: Booking


class UserRequest(BaseModel):
    name: str
    email: str


class User(BaseModel):
    id: str
    name: str
    email: str


class UserCreated(BaseModel):
    message: str
    user: User


class RoomRequest(_CamelModel):
    name: str
    capacity: int = 0
    price_per_night: float = Field(default=0.0, alias="pricePerNight")


class Room(_CamelModel):
    id: str
    name: str
    capacity: int
    price_per_night: float = Field(alias="pricePerNight")


class RoomCreated(BaseModel):
    message: str
    room: Room


class Message(BaseModel):
    message: str
