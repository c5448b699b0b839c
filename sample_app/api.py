"""FastAPI application exposing informational and probe endpoints."""
from __future__ import annotations

import http
import inspect
import logging
from typing import Awaitable, Callable, Optional, Tuple, Union

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import metrics
from .config import Settings, get_settings
from .schemas import (
    ApplicationInfo,
    ErrorResponse,
    HealthChecks,
    HealthResponse,
    InfoResponse,
    NotFoundResponse,
    StatusResponse,
    VersionResponse,
    WelcomeResponse,
)

ACCESS_LOGGER_NAME = "sample_app.access"

logger = logging.getLogger(__name__)
# Request lines are part of the service output; main pins this logger at INFO.
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)

APPLICATION_NAME = "sample-app"
WELCOME_MESSAGE = "Hello from AKS with ArgoCD! 🚀"
PRODUCTION_ERROR_MESSAGE = "An error occurred"

ENDPOINTS: Tuple[Tuple[str, str], ...] = (
    ("/", "Welcome message"),
    ("/health", "Health check"),
    ("/version", "Version info"),
    ("/info", "Detailed info"),
    ("/ready", "Readiness probe"),
    ("/live", "Liveness probe"),
)

# HEAD is answered wherever GET is.
ROUTE_METHODS = ["GET", "HEAD"]

ReadinessCheck = Callable[[], Union[bool, Awaitable[bool]]]


def always_ready() -> bool:
    # Dependency checks (database, downstream services) plug in here.
    return True


async def evaluate_readiness(check: ReadinessCheck) -> bool:
    """Run the readiness check; a check that raises counts as not ready."""
    try:
        result = check()
        if inspect.isawaitable(result):
            result = await result
    except Exception:  # pylint: disable=broad-except
        logger.warning("Readiness check failed", exc_info=True)
        return False
    return bool(result)


def create_app(
    settings: Optional[Settings] = None,
    readiness_check: Optional[ReadinessCheck] = None,
) -> FastAPI:
    """Build the application.

    Handlers read the given settings (the process-wide ones by default) and
    `/ready` answers from ``readiness_check``, which may be sync or async.
    """
    settings = settings or get_settings()
    readiness_check = readiness_check or always_ready

    app = FastAPI(
        title="Sample App",
        description="Demo workload exposing informational and health-check endpoints.",
        version=settings.version,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        client = request.client.host if request.client else "-"
        access_logger.info(
            "[%s] %s %s - %s",
            metrics.utc_timestamp(),
            request.method,
            request.url.path,
            client,
        )
        return await call_next(request)

    @app.api_route("/", methods=ROUTE_METHODS, summary="Welcome message", tags=["info"])
    async def root() -> WelcomeResponse:
        return WelcomeResponse(
            message=WELCOME_MESSAGE,
            timestamp=metrics.utc_timestamp(),
            hostname=metrics.hostname(),
            environment=settings.environment,
            version=settings.version,
        )

    @app.api_route("/health", methods=ROUTE_METHODS, summary="Health check", tags=["probes"])
    async def health() -> HealthResponse:
        used, _ = metrics.heap_usage()
        return HealthResponse(
            uptime=metrics.uptime_seconds(settings),
            timestamp=metrics.utc_timestamp(),
            checks=HealthChecks(memory=metrics.memory_check(used)),
        )

    @app.api_route("/version", methods=ROUTE_METHODS, summary="Version info", tags=["info"])
    async def version() -> VersionResponse:
        return VersionResponse(
            version=settings.version,
            environment=settings.environment,
            runtimeVersion=metrics.runtime_version(),
            platform=metrics.runtime_platform(),
            hostname=metrics.hostname(),
        )

    @app.api_route("/info", methods=ROUTE_METHODS, summary="Detailed info", tags=["info"])
    async def info() -> InfoResponse:
        return InfoResponse(
            application=ApplicationInfo(
                name=APPLICATION_NAME,
                version=settings.version,
                environment=settings.environment,
            ),
            system=metrics.collect_system_info(),
            process=metrics.collect_process_info(),
        )

    @app.api_route("/ready", methods=ROUTE_METHODS, summary="Readiness probe", tags=["probes"])
    async def ready() -> JSONResponse:
        if await evaluate_readiness(readiness_check):
            return JSONResponse(
                content=StatusResponse(status="ready").model_dump(),
                status_code=status.HTTP_200_OK,
            )
        return JSONResponse(
            content=StatusResponse(status="not ready").model_dump(),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    @app.api_route("/live", methods=ROUTE_METHODS, summary="Liveness probe", tags=["probes"])
    async def live() -> StatusResponse:
        return StatusResponse(status="alive")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is still an unmatched route.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            body = NotFoundResponse(path=request.url.path)
            return JSONResponse(content=body.model_dump(), status_code=status.HTTP_404_NOT_FOUND)
        body = ErrorResponse(
            error=http.HTTPStatus(exc.status_code).phrase,
            message=str(exc.detail),
        )
        return JSONResponse(content=body.model_dump(), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Error handling %s %s", request.method, request.url.path)
        message = PRODUCTION_ERROR_MESSAGE if settings.is_production else str(exc)
        body = ErrorResponse(error="Internal Server Error", message=message)
        return JSONResponse(content=body.model_dump(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return app
