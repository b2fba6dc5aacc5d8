"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Body is the flat {status, timestamp, uptime} object, not an envelope
"""

import logging

from fastapi import APIRouter, Depends, status

from roster.api.dependencies import get_health_reporter
from roster.core.health import HealthReporter
from roster.schemas.health import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health_check(reporter: HealthReporter = Depends(get_health_reporter)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse.from_snapshot(reporter.snapshot())
