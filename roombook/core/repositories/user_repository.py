from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.core.entities.user import User


class UserDirectory(ABC):
    @abstractmethod
    def find_by_id(self, user_id: str) -> User | None:
        """Return the user, or None. Raises InvalidIdentifierError if user_id is not a valid id."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> User:
        """Register a user. An empty user_id is replaced by a generated one."""
        raise NotImplementedError
