"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Handlers and services depend on UserRepository, never on a concrete store
    - Implementations provided by the application factory via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Sync methods: the store is in-memory, there is no IO to await
"""

from typing import Protocol

from roster.core.domain_types import UserId
from roster.core.user_record import UserRecord


class UserRepository(Protocol):
    """Contract for user record storage — implemented by infrastructure."""
    def insert(self, name: str, email: str) -> UserRecord: ...
    def insert_if_email_absent(self, name: str, email: str) -> UserRecord | None: ...
    def fetch_all(self) -> list[UserRecord]: ...
    def fetch_by_id(self, user_id: UserId) -> UserRecord | None: ...
    def email_exists(self, email: str) -> bool: ...
    def id_exists(self, user_id: UserId) -> bool: ...
    def clear(self) -> None: ...
    def count(self) -> int: ...
