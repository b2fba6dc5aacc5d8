"""Services Layer — orchestration between validation and storage.

Invariants:
    - Services raise RosterError subclasses; they never build HTTP responses

Design Decisions:
    - Plain functions taking the repository: no service objects to wire
"""
