"""API routers."""

from .health import router as health_router
from .quotes import router as quotes_router

__all__ = [
    "health_router",
    "quotes_router",
]
