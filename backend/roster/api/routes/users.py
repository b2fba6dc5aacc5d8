"""Users — list, fetch and create user records.

Invariants:
    - Every body is an envelope: {success: true, data} or {success: false, error, details?}
    - POST parses the body only when Content-Type is application/json; other media types,
      and an empty body, count as {}; malformed JSON counts as invalid data
    - Failures are raised as RosterError and rendered by the global handlers

Design Decisions:
    - create_user is async to read the raw body; reads are sync and run in the thread pool
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, status

from roster.api.dependencies import get_user_store
from roster.core.errors import UserValidationError
from roster.core.repository_protocols import UserRepository
from roster.schemas.user import UserEnvelope, UserListEnvelope, UserResponse
from roster.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListEnvelope)
def list_users(store: UserRepository = Depends(get_user_store)):
    """All users, in creation order."""
    users = user_service.list_users(store)
    return UserListEnvelope(data=[UserResponse.from_record(u) for u in users])


@router.get("/{user_id}", response_model=UserEnvelope)
def get_user(user_id: str, store: UserRepository = Depends(get_user_store)):
    """One user by id, 404 if unknown."""
    user = user_service.get_user(store, user_id)
    return UserEnvelope(data=UserResponse.from_record(user))


@router.post(
    "", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: Request, store: UserRepository = Depends(get_user_store),
):
    """Validate and store a new user; 409 if the email is taken."""
    payload = await _read_json(request)
    user = user_service.register_user(store, payload)
    return UserEnvelope(data=UserResponse.from_record(user))


async def _read_json(request: Request):
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        return {}
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(f"Malformed JSON body on {request.url.path}")
        raise UserValidationError(["Invalid data format"])
