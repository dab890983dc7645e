"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ntfy_bridge import __version__
from ntfy_bridge.config import Settings, get_settings
from ntfy_bridge.logging_config import configure_logging
from ntfy_bridge.services.dispatcher import AlertDispatcher
from ntfy_bridge.sinks.ntfy import NtfySink

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the bridge holds no connections between requests."""
    settings: Settings = app.state.settings
    logger.info("ntfy-bridge started (ntfy=%s, port=%d)", settings.ntfy_url, settings.port)
    yield
    logger.info("ntfy-bridge shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

    app = FastAPI(
        title="ntfy-bridge",
        version=__version__,
        description="Relays Alertmanager webhook batches to ntfy, shaped by per-field jq queries.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dispatcher = AlertDispatcher(
        sink=NtfySink(settings.ntfy_url, timeout=settings.delivery_timeout),
    )

    from ntfy_bridge.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from ntfy_bridge.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from ntfy_bridge.api.router import api_router
    app.include_router(api_router)

    return app
