"""
API роутеры v1.
"""

from .health_router import router as health_router
from .webhook_router import router as webhook_router

__all__ = [
    "health_router",
    "webhook_router",
]
