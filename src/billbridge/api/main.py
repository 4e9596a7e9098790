"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from billbridge.api.auth import require_api_key
from billbridge.application.conversion import ConversionGateway
from billbridge.domain.errors import ClientError, PayloadTooLargeError
from billbridge.infrastructure.http.forwarder import HttpForwarder
from billbridge.infrastructure.settings import Settings, get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Health check: http://{settings.api_host}:{settings.api_port}/health")

    yield

    logger.info("Shutting down...")
    await app.state.forwarder.aclose()
    logger.info("Shutdown complete")


# ============================================================================
# Error handlers
# ============================================================================


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are 400s with an `error` field, like every other client error."""
    errors = exc.errors()
    for error in errors:
        if error.get("type") == "json_invalid":
            logger.error(
                f"JSON parsing error on {request.method} {request.url.path} "
                f"(content-type: {request.headers.get('content-type')})"
            )
            details = (error.get("ctx") or {}).get("error", error.get("msg"))
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid JSON in request body", "details": str(details)},
            )

    logger.warning(f"Invalid request body on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(errors, exclude={"input", "ctx", "url"})},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit configuration (defaults to environment settings)
        transport: httpx transport for outbound forwards (tests pass a mock)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Base64 to binary conversion and forwarding gateway for bill attachments",
        lifespan=lifespan,
    )

    forwarder = HttpForwarder(timeout=settings.forward_timeout_seconds, transport=transport)
    app.state.settings = settings
    app.state.forwarder = forwarder
    app.state.gateway = ConversionGateway(forwarder)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Incoming request: {request.method} {request.url.path}")

        content_length = request.headers.get("content-length", "")
        if content_length.isdigit():
            size = int(content_length)
        else:
            # Chunked upload: measure the buffered body, which is replayed to the route
            size = len(await request.body())
        if size > settings.max_request_bytes:
            logger.warning(f"Rejected {request.url.path}: body of {size} bytes exceeds limit")
            error = PayloadTooLargeError()
            return JSONResponse(status_code=error.status_code, content=error.to_body())

        response = await call_next(request)
        logger.info(f"Completed {request.method} {request.url.path} -> {response.status_code}")
        return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    from billbridge.api.routes import echo, protected, router

    app.include_router(router)
    app.include_router(protected)
    if settings.enable_echo_endpoint:
        app.add_api_route(
            "/api/test",
            echo,
            methods=["POST"],
            tags=["test"],
            dependencies=[Depends(require_api_key)],
        )

    return app


# Create app instance
app = create_app()
