"""
Reflect FastAPI Application

Main entry point for the Reflect API: chatbot replies, sentiment
analysis, and journal entry reflections.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

# Common library imports
from common.utils import (
    APIException,
    InternalServerException,
    ValidationException,
    success_response,
    error_response,
)

# App-specific imports
from app.config import settings
from app.routers import reflection_router
from app.dependencies import init_all_services, get_active_ai_provider

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Initializes the AI provider and reflection services on startup.
    """
    logger.info("Starting Reflect API...")

    try:
        settings.validate_required()
    except ValueError as e:
        logger.warning(f"{e}\nContinuing with local fallbacks")

    init_all_services(settings)

    logger.info("Reflect API started successfully!")

    yield

    logger.info("Reflect API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Reflect API",
    description="AI reply generation and fallback engine for a journaling app",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error Handlers
# =============================================================================
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Render API exceptions in the standard error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, code=exc.code, details=exc.details),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report body validation failures as VALIDATION_ERROR."""
    return await api_exception_handler(
        request,
        ValidationException("Request validation failed", errors=jsonable_encoder(exc.errors())),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and hide their details from clients."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return await api_exception_handler(request, InternalServerException())


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(reflection_router, prefix=API_PREFIX, tags=["Reflection"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Reports whether the AI provider has a usable credential; the API
    serves fallback replies either way.
    """
    provider = get_active_ai_provider()

    return success_response({
        "status": "ok",
        "version": "1.0.0",
        "aiProvider": settings.AI_PROVIDER,
        "aiConfigured": bool(provider and provider.is_configured()),
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
