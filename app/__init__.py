"""
Reflect application-specific code.

This package contains the journaling assistant's AI layer:
- services: Reply generation, sentiment analysis, entry reflections
- routers: Thin FastAPI endpoints over the services
- schemas: Request/response models
- config: Application settings

Uses generic infrastructure from the common/ package.
"""

from app.config import settings

__all__ = ["settings"]
