"""In-Memory User Store — insertion-ordered records keyed by id.

Invariants:
    - Ids are unique; a generated id colliding with a live record is regenerated
    - insert_if_email_absent is atomic: check and insert happen under one lock
    - Reads return snapshots; callers cannot mutate the store through them
    - insert() does not enforce email uniqueness (callers choose the atomic path)

Design Decisions:
    - threading.Lock over asyncio.Lock: FastAPI runs sync routes in a thread pool
    - dict keeps insertion order, so fetch_all() is creation order for free
    - Clock and id factory injected so tests can pin them
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from roster.core.domain_types import UserId
from roster.core.user_record import UserRecord

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


class InMemoryUserStore:
    """Thread-safe in-memory implementation of UserRepository."""

    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._users: dict[UserId, UserRecord] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._id_factory = id_factory

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def insert(self, name: str, email: str) -> UserRecord:
        """Store a new record without checking email uniqueness."""
        with self._lock:
            return self._insert_locked(name, email)

    def insert_if_email_absent(self, name: str, email: str) -> UserRecord | None:
        """Store a new record unless the email is taken. None means duplicate."""
        with self._lock:
            if self._email_exists_locked(email):
                return None
            return self._insert_locked(name, email)

    def fetch_all(self) -> list[UserRecord]:
        with self._lock:
            return list(self._users.values())

    def fetch_by_id(self, user_id: UserId) -> UserRecord | None:
        with self._lock:
            return self._users.get(user_id)

    def email_exists(self, email: str) -> bool:
        with self._lock:
            return self._email_exists_locked(email)

    def id_exists(self, user_id: UserId) -> bool:
        with self._lock:
            return user_id in self._users

    def clear(self) -> None:
        """Drop every record. Test/reset use only."""
        with self._lock:
            self._users.clear()
        logger.debug("User store cleared")

    # ─── Lock-held helpers ────────────────────────────────────────

    def _insert_locked(self, name: str, email: str) -> UserRecord:
        user_id = UserId(self._id_factory())
        while user_id in self._users:
            user_id = UserId(self._id_factory())
        record = UserRecord(
            id=user_id, name=name, email=email, created_at=self._clock(),
        )
        self._users[user_id] = record
        return record

    def _email_exists_locked(self, email: str) -> bool:
        return any(user.email == email for user in self._users.values())
