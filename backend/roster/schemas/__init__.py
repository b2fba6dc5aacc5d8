"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the wire shape; core records convert via from_record/from_snapshot
    - Every user-facing body is wrapped in the {success, data} envelope (health excepted)

Design Decisions:
    - Separate from core: schemas are API contracts, records are domain values
"""
