"""Dependencies — hand the per-application store and reporter to routes.

Invariants:
    - Routes never construct a store; they receive the one the factory built
    - Overridable with app.dependency_overrides in tests
"""

from fastapi import Request

from roster.config import Settings
from roster.core.health import HealthReporter
from roster.core.repository_protocols import UserRepository


def get_user_store(request: Request) -> UserRepository:
    return request.app.state.user_store


def get_health_reporter(request: Request) -> HealthReporter:
    return request.app.state.health_reporter


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
