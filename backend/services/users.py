"""User operations: validation and name uniqueness on top of the repository."""

import logging
import threading

from errors import DuplicateNameError, NotFoundError, ValidationError
from services.repository import UserRepository
from services.store import User

logger = logging.getLogger(__name__)


def _require(field: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty string")
    return value


class UserService:
    def __init__(self, repository: UserRepository):
        self._repository = repository
        # Held across check-then-write so two requests for the same name
        # can't both pass the uniqueness check.
        self._write_lock = threading.Lock()

    def list_users(self) -> list[User]:
        return self._repository.get_all()

    def get_user(self, user_id: int) -> User:
        user = self._repository.get(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return user

    def create_user(self, name: str, address: str) -> User:
        name = _require("name", name)
        address = _require("address", address)

        with self._write_lock:
            if self._repository.find_by_name(name) is not None:
                raise DuplicateNameError(name)
            user = self._repository.add(name, address)

        logger.info("Created user %d (%s)", user.id, user.name)
        return user

    def update_user(self, user_id: int, name: str, address: str) -> User:
        name = _require("name", name)
        address = _require("address", address)

        with self._write_lock:
            if self._repository.get(user_id) is None:
                raise NotFoundError(user_id)
            existing = self._repository.find_by_name(name)
            if existing is not None and existing.id != user_id:
                raise DuplicateNameError(name)
            user = self._repository.update(user_id, name, address)

        logger.info("Updated user %d", user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        with self._write_lock:
            deleted = self._repository.delete(user_id)

        if not deleted:
            raise NotFoundError(user_id)
        logger.info("Deleted user %d", user_id)

    def count(self) -> int:
        return self._repository.count()
