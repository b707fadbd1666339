"""Health check endpoint."""

from fastapi import APIRouter

from library.infrastructure.adapters.inbound.http.dependencies import ContainerDep
from library.infrastructure.adapters.inbound.http.schemas import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
async def health_check(container: ContainerDep) -> HealthResponse:
    """
    Report application status.

    When reservations are stored in PostgreSQL the database connection is
    checked as well; a failing check reports ``degraded``.
    """
    settings = container.settings
    checks: dict[str, str] = {}

    if container.database is not None:
        checks["database"] = "ok" if await container.database.health_check() else "ko"

    return HealthResponse(
        status="degraded" if "ko" in checks.values() else "healthy",
        app=settings.app_name,
        version=settings.version,
        environment=settings.environment,
        reservation_store=settings.reservation_store,
        checks=checks,
    )
