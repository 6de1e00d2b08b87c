"""
Health endpoints: liveness ping and dependency status.
"""

from fastapi import APIRouter, Response, status
import httpx

from config.settings import settings
from recipes_api.api.envelope import RecipeResponse
from recipes_api.database import mongodb


router = APIRouter()


@router.get(
    "/health",
    response_model=RecipeResponse,
    summary="Dependency status for the database and identity provider"
)
async def health_check(response: Response):
    """
    Report MongoDB reachability and the configured identity provider.

    Answers 503 with message ``degraded`` while MongoDB cannot be pinged;
    every favorites and catalog call would fail with a storage error then.
    The identity provider is only named, not called, since checking it
    requires a bearer credential.
    """
    mongodb_connected = await mongodb.ping()
    code = status.HTTP_200_OK if mongodb_connected else status.HTTP_503_SERVICE_UNAVAILABLE
    response.status_code = code

    return RecipeResponse(
        status=code,
        message="healthy" if mongodb_connected else "degraded",
        data={
            "data": {
                "version": settings.app_version,
                "environment": settings.environment,
                "mongodbConnected": mongodb_connected,
                "database": settings.mongodb_db_name,
                "identityProvider": httpx.URL(settings.kc_userinfo_endpoint).host,
                "timeoutSeconds": settings.request_timeout_seconds,
            }
        },
    )


@router.get("/ping", summary="Liveness check")
async def ping():
    return {"ping": "pong"}
