"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from gateway_common import setup_logging
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import AppConfig
from dependencies import build_http_client, build_store
from interfaces import DataStore
from response_models import ErrorResponse
from routes import health_router, transcribe_router

logger = setup_logging()


async def monitor_store(store: DataStore, interval_seconds: float) -> None:
    """Refreshes the store connection state every ``interval_seconds`` until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        await asyncio.to_thread(store.ping)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Renders HTTP errors as ``{"error": ..., "details": ...}``."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    elif exc.status_code == 404:
        content = ErrorResponse(error="Not found").to_content()
    else:
        content = ErrorResponse(error=str(exc.detail)).to_content()
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request", details=details).to_content(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").to_content(),
    )


def create_app(config: AppConfig) -> FastAPI:
    """
    Builds the gateway application around an immutable configuration.

    The data store is connected and the outbound HTTP client opened during
    startup; a store that cannot be reached aborts startup. While serving, a
    background task pings the store so health reports track its current state.
    A missing provider credential only disables the transcription endpoint.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not config.provider.is_configured:
            logger.warning(
                "Transcription provider API key is not set; transcription is disabled"
            )

        store = build_store(config)
        store.connect()

        app.state.config = config
        app.state.store = store

        monitor = None
        if config.database.ping_interval_seconds > 0:
            monitor = asyncio.create_task(
                monitor_store(store, config.database.ping_interval_seconds)
            )

        try:
            async with build_http_client() as http_client:
                app.state.http_client = http_client
                logger.info(
                    "Transcription gateway ready",
                    extra={
                        "api_prefix": config.server.api_prefix,
                        "transcription_enabled": config.provider.is_configured,
                    },
                )
                yield
        finally:
            if monitor is not None:
                monitor.cancel()
                with suppress(asyncio.CancelledError):
                    await monitor
            store.close()

    app = FastAPI(title="Transcription Gateway", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.server.cors_origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router, prefix=config.server.api_prefix)
    app.include_router(transcribe_router, prefix=config.server.api_prefix)

    return app
