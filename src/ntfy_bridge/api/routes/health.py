"""Health check endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ntfy_bridge import __version__

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "hello world"


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "ntfy-bridge", "version": __version__}
