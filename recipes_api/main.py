"""
Main FastAPI application.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger
import httpx
import sys

from config.settings import settings
from recipes_api.api.envelope import RecipeResponse
from recipes_api.api.routes import health, recipes, favorites
from recipes_api.database import mongodb, BeanieRecipeStore, BeanieUserFavoritesStore
from recipes_api.errors import (
    AuthError,
    FavoritesStorageError,
    ForbiddenError,
    IdentityProviderTimeout,
    IdentityTransportError,
    MalformedIdentityResponse,
    RecipeNotFoundError,
    StoreError,
    StoreTimeoutError,
    UnauthenticatedError,
)
from recipes_api.services import IdentityResolver


# Configure logging
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=settings.log_level,
)
logger.add(
    settings.log_file,
    rotation="500 MB",
    retention="10 days",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    level=settings.log_level,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up Table Recipes API...")
    await mongodb.connect()

    http_client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)
    app.state.identity_resolver = IdentityResolver(
        settings.kc_userinfo_endpoint,
        timeout=settings.request_timeout_seconds,
        client=http_client,
    )
    app.state.recipe_store = BeanieRecipeStore(timeout=settings.request_timeout_seconds)
    app.state.favorites_store = BeanieUserFavoritesStore(timeout=settings.request_timeout_seconds)

    logger.success("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down Table Recipes API...")
    await http_client.aclose()
    await mongodb.disconnect()
    logger.info("Application shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Recipe catalog with per-user favorites",
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
    lifespan=lifespan,
)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


def error_response(status_code: int, detail: str) -> JSONResponse:
    body = RecipeResponse(status=status_code, message="error", data={"data": detail})
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError):
    if isinstance(exc, UnauthenticatedError):
        return error_response(status.HTTP_401_UNAUTHORIZED, "error validating user")
    if isinstance(exc, IdentityProviderTimeout):
        return error_response(status.HTTP_504_GATEWAY_TIMEOUT, "identity provider timed out")
    if isinstance(exc, (IdentityTransportError, MalformedIdentityResponse)):
        return error_response(status.HTTP_502_BAD_GATEWAY, "identity provider unavailable")
    return error_response(status.HTTP_401_UNAUTHORIZED, "error validating user")


@app.exception_handler(ForbiddenError)
async def forbidden_handler(request: Request, exc: ForbiddenError):
    return error_response(status.HTTP_403_FORBIDDEN, "Forbidden")


@app.exception_handler(RecipeNotFoundError)
async def recipe_not_found_handler(request: Request, exc: RecipeNotFoundError):
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(FavoritesStorageError)
async def favorites_storage_handler(request: Request, exc: FavoritesStorageError):
    logger.error(f"{exc}: {exc.cause}")
    if isinstance(exc.cause, StoreTimeoutError):
        return error_response(status.HTTP_504_GATEWAY_TIMEOUT, "storage timed out")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "storage failure")


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(str(exc))
    if isinstance(exc, StoreTimeoutError):
        return error_response(status.HTTP_504_GATEWAY_TIMEOUT, "storage timed out")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "storage failure")


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "We couldn't find the page you requested!"},
        )
    return await http_exception_handler(request, exc)


# Include routers
app.include_router(health.router, prefix=settings.api_prefix, tags=["Health"])
app.include_router(recipes.router, prefix=settings.api_prefix, tags=["Recipes"])
app.include_router(favorites.router, prefix=settings.api_prefix, tags=["Favorites"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "environment": settings.environment,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recipes_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
