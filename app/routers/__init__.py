"""
Reflect API Routers.

All routers are imported here for easy access.
"""

from app.routers.reflection import router as reflection_router

__all__ = [
    "reflection_router",
]
