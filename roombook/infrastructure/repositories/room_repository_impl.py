from __future__ import annotations

from sqlalchemy.orm import Session

from roombook.core.entities.room import Room
from roombook.core.repositories.identifiers import require_identifier
from roombook.core.repositories.room_repository import RoomDirectory
from roombook.infrastructure.models.models import RoomModel


class RoomDirectoryImpl(RoomDirectory):
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, room_id: str) -> Room | None:
        row = self._db.get(RoomModel, require_identifier(room_id, kind="room"))
        if row is None:
            return None

        return self._to_entity(row)

    def add(self, room: Room) -> Room:
        row = RoomModel(name=room.name, capacity=room.capacity, price_per_night=room.price_per_night)
        if room.room_id:
            row.room_id = require_identifier(room.room_id, kind="room")

        self._db.add(row)
        self._db.commit()
        return self._to_entity(row)

    @staticmethod
    def _to_entity(row: RoomModel) -> Room:
        return Room(
            room_id=row.room_id,
            name=row.name,
            capacity=row.capacity,
            price_per_night=row.price_per_night,
        )
