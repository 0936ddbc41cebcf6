from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.core.entities.room import Room


class RoomDirectory(ABC):
    @abstractmethod
    def find_by_id(self, room_id: str) -> Room | None:
        """Return the room, or None. Raises InvalidIdentifierError if room_id is not a valid id."""
        raise NotImplementedError

    @abstractmethod
    def add(self, room: Room) -> Room:
        """Register a room. An empty room_id is replaced by a generated one."""
        raise NotImplementedError
