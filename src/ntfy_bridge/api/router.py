"""Master API router."""

from fastapi import APIRouter

from ntfy_bridge.api.routes import alerts, health

api_router = APIRouter()
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(alerts.router)
