"""Health check routes."""

from api.config import Settings, get_settings
from api.models.health import HealthCheckResponse
from api.services import get_user_directory
from common.services.user_directory import UserDirectory
from fastapi import APIRouter, Depends

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    directory: UserDirectory = Depends(get_user_directory),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and the number of stored users
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=directory.count(),
    )
