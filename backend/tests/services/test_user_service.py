"""User Service — orchestration of validation, uniqueness and fault wrapping.

Tests cover:
    - register_user validates before the store is touched
    - Duplicate email raises DuplicateEmailError and stores nothing
    - Store faults become InternalServerError with the fault message
    - get_user raises ResourceNotFoundError for unknown ids
"""

import pytest

from roster.core.errors import (
    DuplicateEmailError, InternalServerError,
    ResourceNotFoundError, UserValidationError,
)
from roster.infrastructure.user_store import InMemoryUserStore
from roster.services import user_service


class _BrokenStore(InMemoryUserStore):
    def fetch_all(self):
        raise RuntimeError("disk on fire")

    def fetch_by_id(self, user_id):
        raise RuntimeError("disk on fire")

    def insert_if_email_absent(self, name, email):
        raise RuntimeError("disk on fire")


def test_register_user_stores_valid_payload():
    store = InMemoryUserStore()
    user = user_service.register_user(
        store, {"name": "John Doe", "email": "john@example.com"},
    )
    assert store.fetch_by_id(user.id) == user


def test_register_user_rejects_invalid_payload_without_storing():
    store = InMemoryUserStore()
    with pytest.raises(UserValidationError) as exc_info:
        user_service.register_user(store, {"name": "", "email": "bad"})
    assert exc_info.value.errors == ["Name is required", "Email format is invalid"]
    assert store.count() == 0


def test_register_user_rejects_duplicate_email():
    store = InMemoryUserStore()
    payload = {"name": "John", "email": "john@example.com"}
    user_service.register_user(store, payload)
    with pytest.raises(DuplicateEmailError):
        user_service.register_user(store, {**payload, "name": "Other John"})
    assert store.count() == 1


def test_get_user_unknown_id_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        user_service.get_user(InMemoryUserStore(), "nope")


@pytest.mark.parametrize("call", [
    lambda s: user_service.list_users(s),
    lambda s: user_service.get_user(s, "any"),
    lambda s: user_service.register_user(s, {"name": "A", "email": "a@x.io"}),
])
def test_store_faults_become_internal_errors(call):
    with pytest.raises(InternalServerError) as exc_info:
        call(_BrokenStore())
    assert exc_info.value.details == ["disk on fire"]
