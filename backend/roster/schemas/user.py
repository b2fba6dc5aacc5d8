"""User Schemas — wire shape of user records and their envelopes.

Invariants:
    - created_at serialized as camelCase createdAt (ISO-8601, millisecond, Z)
    - Envelopes always carry success=True; failures never use these models

Design Decisions:
    - Request bodies are NOT modelled here: create accepts untyped JSON so the
      validator can report every field problem in one response
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from roster.core.user_record import UserRecord


class UserResponse(BaseModel):
    """Public-facing user record."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls.model_validate(record.to_dict())


class UserEnvelope(BaseModel):
    success: Literal[True] = True
    data: UserResponse


class UserListEnvelope(BaseModel):
    success: Literal[True] = True
    data: list[UserResponse]


class ServiceBanner(BaseModel):
    success: Literal[True] = True
    message: str
    version: str
