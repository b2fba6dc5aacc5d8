"""User Validation — field rules for candidate user payloads.

Invariants:
    - Input that is not a structured object (None, scalars) short-circuits with "Invalid data format"
    - Lists are structured objects without fields: both fields are reported as required
    - Name checks run before email checks; within a field: required → type → shape/length
    - At most one error per field; every failing field is reported
    - Pure: never mutates the candidate, never raises

Design Decisions:
    - Only None, "", 0 and False count as missing; empty lists and objects are present but not strings
    - Length is measured on the untrimmed name in UTF-16 code units; emptiness on the trimmed one
"""

import re
from dataclasses import dataclass, field
from typing import Any

from roster.core.domain_types import NAME_MAX_LENGTH

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_email(email: Any) -> bool:
    """True when email is a string shaped like local@domain.tld after trimming."""
    if _is_missing(email) or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def validate_user_data(data: Any) -> ValidationResult:
    """Check a candidate {name, email} payload and collect every field error."""
    if isinstance(data, list):
        data = {}
    if not isinstance(data, dict):
        return ValidationResult(valid=False, errors=["Invalid data format"])

    errors: list[str] = []

    name_error = _check_name(data.get("name"))
    if name_error:
        errors.append(name_error)

    email_error = _check_email(data.get("email"))
    if email_error:
        errors.append(email_error)

    return ValidationResult(valid=not errors, errors=errors)


def _check_name(name: Any) -> str | None:
    if _is_missing(name):
        return "Name is required"
    if not isinstance(name, str):
        return "Name must be a string"
    if not name.strip():
        return "Name cannot be empty or whitespace only"
    if _utf16_length(name) > NAME_MAX_LENGTH:
        return f"Name must be {NAME_MAX_LENGTH} characters or less"
    return None


def _check_email(email: Any) -> str | None:
    if _is_missing(email):
        return "Email is required"
    if not isinstance(email, str):
        return "Email must be a string"
    if not validate_email(email):
        return "Email format is invalid"
    return None


def _is_missing(value: Any) -> bool:
    return value is None or value in ("", 0, False)


def _utf16_length(text: str) -> int:
    # astral characters (emoji) count as two units
    return len(text.encode("utf-16-le", "surrogatepass")) // 2
