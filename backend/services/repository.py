"""Read-through / write-invalidate repository over the user store and cache.

Reads check the cache first and fill it from the store on a miss. Writes go
to the store and then drop every cache key they could have made stale, so a
read that follows a write always rebuilds from the store.
"""

import logging
import threading

from services.cache import TTLCache
from services.store import User, UserStore

logger = logging.getLogger(__name__)

ALL_USERS_KEY = "users:all"


def user_key(user_id: int) -> str:
    return f"users:{user_id}"


class UserRepository:
    def __init__(self, store: UserStore, cache: TTLCache):
        self._store = store
        self._cache = cache
        # Serializes cache fills against writes so a reader can't re-cache
        # a snapshot taken before a concurrent write.
        self._lock = threading.RLock()

    def get_all(self) -> list[User]:
        with self._lock:
            cached = self._cache.get(ALL_USERS_KEY)
            if cached is not None:
                return list(cached)

            users = self._store.get_all()
            self._cache.set(ALL_USERS_KEY, users)
            return list(users)

    def get(self, user_id: int) -> User | None:
        key = user_key(user_id)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            user = self._store.get(user_id)
            if user is not None:
                self._cache.set(key, user)
            return user

    def find_by_name(self, name: str) -> User | None:
        """Exact-match lookup straight against the store, never the cache."""
        for user in self._store.get_all():
            if user.name == name:
                return user
        return None

    def add(self, name: str, address: str) -> User:
        with self._lock:
            user = User(id=self._store.next_id(), name=name, address=address)
            self._store.add(user)
            self._invalidate(user.id)
        return user

    def update(self, user_id: int, name: str, address: str) -> User | None:
        user = User(id=user_id, name=name, address=address)
        with self._lock:
            if not self._store.update(user_id, user):
                return None
            self._invalidate(user_id)
        return user

    def delete(self, user_id: int) -> bool:
        with self._lock:
            if not self._store.remove(user_id):
                return False
            self._invalidate(user_id)
        return True

    def count(self) -> int:
        return len(self._store)

    def _invalidate(self, user_id: int) -> None:
        self._cache.delete(ALL_USERS_KEY)
        self._cache.delete(user_key(user_id))
        logger.debug("Invalidated cache for user %d", user_id)
