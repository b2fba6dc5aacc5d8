"""User Record — the immutable stored user entity and its wire shape.

Invariants:
    - Records are frozen: no field is reassigned after creation
    - created_at is timezone-aware UTC
    - to_dict() emits camelCase createdAt with millisecond precision and a trailing Z

Design Decisions:
    - Frozen dataclass over Pydantic model: core stays free of boundary libraries
    - Name and email stored exactly as submitted; trimming is a validation concern only
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from roster.core.domain_types import UserId


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with milliseconds, e.g. 2026-01-01T00:00:00.000Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class UserRecord:
    """A user stored in the roster."""
    id: UserId
    name: str
    email: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": format_timestamp(self.created_at),
        }
