"""Root — service banner at GET /."""

from fastapi import APIRouter, Depends

from roster.api.dependencies import get_app_settings
from roster.config import Settings
from roster.schemas.user import ServiceBanner

router = APIRouter(tags=["root"])


@router.get("/", response_model=ServiceBanner)
def service_banner(settings: Settings = Depends(get_app_settings)):
    """Name and version of the running service."""
    return ServiceBanner(
        message=settings.service_name, version=settings.service_version,
    )
