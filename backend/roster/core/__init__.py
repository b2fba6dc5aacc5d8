"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Functions are pure; clocks and id factories are passed in, never read globally

Design Decisions:
    - Functional core separated from imperative shell
"""
