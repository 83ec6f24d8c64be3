"""
Business logic for users.

``UserStore`` owns the in‑memory collection of users, the identifier
counter and the lock guarding both.  Every mutation rewrites the
snapshot on disk before returning, so after a successful call memory
and disk agree.  When the write fails the change is kept in memory
and ``PersistenceError`` is raised; the next successful write will
include it.

Identifiers are matched by their decimal text, so ``"007"`` does not
find user ``7``.
"""

import logging
import threading
from typing import List, Optional

from fastapi import Request

from ..core.storage import PathLike, PersistenceError, load_users, save_users
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

__all__ = ["UserStore", "UserNotFoundError", "PersistenceError", "get_user_store"]


class UserNotFoundError(ValueError):
    """Raised when no user carries the requested identifier."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserStore:
    """Ordered collection of users persisted to a JSON snapshot.

    All operations, reads included, take the same lock and hold it
    while the snapshot is written.
    """

    def __init__(self, path: PathLike) -> None:
        self.path = path
        self._lock = threading.Lock()
        self._users: List[UserRead] = load_users(path)
        self._next_id = max((user.id for user in self._users), default=0) + 1

    @classmethod
    def open(cls, path: PathLike) -> "UserStore":
        """Load the snapshot at ``path`` (or start empty) and return a store."""
        return cls(path)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def _index_of(self, user_id: str) -> Optional[int]:
        for index, user in enumerate(self._users):
            if str(user.id) == user_id:
                return index
        return None

    def _persist(self) -> None:
        try:
            save_users(self.path, self._users)
        except PersistenceError:
            logger.exception("Could not persist %d users", len(self._users))
            raise

    def create(self, data: UserCreate) -> UserRead:
        """Append a new user with the next identifier and persist."""
        with self._lock:
            user = UserRead(id=self._next_id, name=data.name, email=data.email)
            self._next_id += 1
            self._users.append(user)
            logger.info("Created user %s", user.id)
            self._persist()
            return user.model_copy()

    def list(self) -> List[UserRead]:
        """Return every user in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get(self, user_id: str) -> UserRead:
        """Return the user whose identifier text equals ``user_id``."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise UserNotFoundError(user_id)
            return self._users[index].model_copy()

    def update(self, user_id: str, data: UserUpdate) -> UserRead:
        """Replace the name and e‑mail of an existing user and persist.

        The identifier never changes.  Raises ``UserNotFoundError``
        without touching the snapshot when the user does not exist.
        """
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise UserNotFoundError(user_id)
            user = self._users[index]
            user.name = data.name
            user.email = data.email
            logger.info("Updated user %s", user.id)
            self._persist()
            return user.model_copy()

    def delete(self, user_id: str) -> None:
        """Remove a user, keeping the order of the rest, and persist."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise UserNotFoundError(user_id)
            removed = self._users.pop(index)
            logger.info("Deleted user %s", removed.id)
            self._persist()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.user_store
