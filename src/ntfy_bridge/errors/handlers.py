"""FastAPI exception handlers producing plain-text diagnostics."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ntfy_bridge.errors.exceptions import BridgeError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(BridgeError)
    async def bridge_error_handler(request: Request, exc: BridgeError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        logger.warning(
            "Request rejected (%s %s, code=%s, trace_id=%s): %s",
            request.method,
            request.url.path,
            exc.code,
            trace_id,
            exc.details,
        )
        return PlainTextResponse(exc.diagnostic(), status_code=exc.status_code)
