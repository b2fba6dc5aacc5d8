"""User Service — list, fetch and register users against a UserRepository.

Invariants:
    - register_user validates before touching the store
    - Email uniqueness decided by the store's atomic insert_if_email_absent
    - Unexpected store faults surface as InternalServerError carrying the fault's message
    - Reads never mutate the repository

Design Decisions:
    - Fault wrapping lives here, so every route gets the same 500 envelope
"""

import logging
from typing import Any, Callable, TypeVar

from roster.core.domain_types import UserId
from roster.core.errors import (
    DuplicateEmailError, ErrorContext, InternalServerError,
    ResourceNotFoundError, RosterError, UserValidationError,
)
from roster.core.repository_protocols import UserRepository
from roster.core.user_record import UserRecord
from roster.core.validation import validate_user_data

logger = logging.getLogger(__name__)

T = TypeVar("T")


def list_users(store: UserRepository) -> list[UserRecord]:
    """All users in insertion order."""
    return _guarded("list users", store.fetch_all)


def get_user(store: UserRepository, user_id: str) -> UserRecord:
    """The user with this id, or ResourceNotFoundError."""
    user = _guarded("fetch user", lambda: store.fetch_by_id(UserId(user_id)))
    if user is None:
        raise ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))
    return user


def register_user(store: UserRepository, payload: Any) -> UserRecord:
    """Validate an untyped payload and store it if its email is free."""
    result = validate_user_data(payload)
    if not result.valid:
        raise UserValidationError(result.errors)

    name, email = payload["name"], payload["email"]
    user = _guarded(
        "create user", lambda: store.insert_if_email_absent(name, email),
    )
    if user is None:
        raise DuplicateEmailError(email)

    logger.info("User created", extra={"user_id": user.id})
    return user


def _guarded(operation: str, call: Callable[[], T]) -> T:
    try:
        return call()
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Failed to {operation}: {e}", exc_info=True)
        raise InternalServerError(str(e)) from e
