"""API routers for the fittrack application."""

from fittrack.routers.health_metrics import router as health_metrics_router
from fittrack.routers.shopping_lists import router as shopping_lists_router

__all__ = [
    "health_metrics_router",
    "shopping_lists_router",
]
