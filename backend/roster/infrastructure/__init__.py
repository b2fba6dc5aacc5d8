"""Infrastructure Layer — stateful components and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never imports api/ or services/

Design Decisions:
    - One store instance per application, created by the factory
"""
