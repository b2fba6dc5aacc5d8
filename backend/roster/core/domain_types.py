"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the textual UUID — handlers never build ids themselves
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - UserId is str, not UUID: ids are opaque on the wire and looked up verbatim
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

UptimeSeconds = NewType("UptimeSeconds", float)  # >= 0.0


# ─── Constants ───────────────────────────────────────────────────

NAME_MAX_LENGTH = 100


# ─── Enums ───────────────────────────────────────────────────────

class HealthStatus(str, Enum):
    """Process health states reported by GET /health."""
    HEALTHY = "healthy"
