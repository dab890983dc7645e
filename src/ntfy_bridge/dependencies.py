"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from ntfy_bridge.services.dispatcher import AlertDispatcher


def get_dispatcher(request: Request) -> AlertDispatcher:
    """Return the dispatcher built at startup."""
    return request.app.state.dispatcher


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


# Type aliases for dependency injection
Dispatcher = Annotated[AlertDispatcher, Depends(get_dispatcher)]
TraceId = Annotated[str, Depends(get_trace_id)]
