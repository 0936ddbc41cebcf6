from __future__ import annotations

from sqlalchemy.orm import Session

from roombook.core.entities.user import User
from roombook.core.repositories.identifiers import require_identifier
from roombook.core.repositories.user_repository import UserDirectory
from roombook.infrastructure.models.models import UserModel


class UserDirectoryImpl(UserDirectory):
    """SQLAlchemy implementation of the user directory."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, user_id: str) -> User | None:
        row = self._db.get(UserModel, require_identifier(user_id, kind="user"))
        if row is None:
            return None

        return User(user_id=row.user_id, name=row.name, email=row.email)

    def add(self, user: User) -> User:
        row = UserModel(name=user.name, email=user.email)
        if user.user_id:
            row.user_id = require_identifier(user.user_id, kind="user")

        self._db.add(row)
        self._db.commit()
        return User(user_id=row.user_id, name=row.name, email=row.email)
