from __future__ import annotations

import logging

from roombook.core.entities.room import Room
from roombook.core.entities.user import User
from roombook.core.repositories.room_repository import RoomDirectory
from roombook.core.repositories.user_repository import UserDirectory

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    def __init__(self, *, user_directory: UserDirectory) -> None:
        self._user_directory = user_directory

    def execute(self, *, name: str, email: str) -> User:
        user = self._user_directory.add(User(user_id="", name=name, email=email))
        logger.info("Registered user %s", user.user_id)
        return user


class RegisterRoomUseCase:
    def __init__(self, *, room_directory: RoomDirectory) -> None:
        self._room_directory = room_directory

    def execute(self, *, name: str, capacity: int, price_per_night: float) -> Room:
        room = self._room_directory.add(
            Room(room_id="", name=name, capacity=capacity, price_per_night=price_per_night)
        )
        logger.info("Registered room %s", room.room_id)
        return room
