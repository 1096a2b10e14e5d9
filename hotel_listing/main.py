"""
Hotel Listing API Application Entry Point

FastAPI application main entry, including router registration and application configuration.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRouter

from hotel_listing.api import countries_router, hotels_router, users_router
from hotel_listing.common.errors import AppError
from hotel_listing.config import get_settings
from hotel_listing.db.session import init_db
from hotel_listing.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


# Application Lifecycle Management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Create tables and seed roles (and sample data) on startup.
    """
    await init_db()
    yield


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description="Countries and hotels catalog with JWT authentication",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
# Parse ALLOWED_ORIGINS from comma-separated string to list
allowed_origins_str = settings.ALLOWED_ORIGINS.strip()
if allowed_origins_str:
    allowed_origins = [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]
else:
    # In development mode with DEBUG=True, allow localhost origins
    if settings.DEBUG:
        allowed_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        allowed_origins = []

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global Exception Handler
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Handle application custom exceptions

    In production mode, error details are hidden to prevent information leakage.
    """
    settings = get_settings()
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=settings.DEBUG),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions

    Stack traces are logged; only DEBUG mode returns them to clients.
    """
    settings = get_settings()
    logger.error(
        "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )

    if settings.DEBUG:
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "message": str(exc),
                    "type": type(exc).__name__,
                    "code": "internal_error",
                    "traceback": traceback.format_exc().split("\n"),
                }
            },
        )

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "message": "Internal server error",
                "type": "internal_error",
                "code": "internal_error",
            }
        },
    )


# Health Check Endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health Check

    Used for service liveness probe.
    """
    return {"status": "healthy"}


api_router = APIRouter(prefix="/api")
api_router.include_router(countries_router)
api_router.include_router(hotels_router)
api_router.include_router(users_router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hotel_listing.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
