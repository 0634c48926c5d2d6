"""In-memory user store. The single source of truth for user records."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: int
    name: str
    address: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "address": self.address}


class UserStore:
    """Insertion-ordered list of users guarded by one lock.

    No uniqueness checks happen here; that belongs to the service layer.
    """

    def __init__(self):
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Reserve the next identifier. Ids are never reused."""
        with self._lock:
            self._last_id += 1
            return self._last_id

    def add(self, user: User) -> None:
        with self._lock:
            self._users.append(user)

    def get_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def get(self, user_id: int) -> User | None:
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def update(self, user_id: int, user: User) -> bool:
        """Replace the user with this id in place. False if it doesn't exist."""
        with self._lock:
            for idx, existing in enumerate(self._users):
                if existing.id == user_id:
                    self._users[idx] = user
                    return True
        return False

    def remove(self, user_id: int) -> bool:
        with self._lock:
            for idx, existing in enumerate(self._users):
                if existing.id == user_id:
                    del self._users[idx]
                    return True
        return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
