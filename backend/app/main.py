"""
SlugSpace - FastAPI Application

Main entry point for the backend API.
Serves personalized club, course and college recommendations.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config.settings import settings
from app.infrastructure.exceptions import (
    SlugSpaceError,
    ValidationError,
    NotFoundError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"SlugSpace Backend starting in {settings.environment} mode...")

    if settings.database_url:
        try:
            from app.infrastructure.db.database import init_db
            await init_db()
            logger.info("SQLModel database connection pool initialized")
        except Exception as e:
            logger.warning(f"SQLModel database initialization skipped: {e}")

    yield

    from app.api.dependencies import get_recommendation_cache
    await get_recommendation_cache().close()

    if settings.database_url:
        try:
            from app.infrastructure.db.database import close_db
            await close_db()
            logger.info("SQLModel database connection pool closed")
        except Exception as e:
            logger.warning(f"SQLModel database shutdown error: {e}")

    logger.info("SlugSpace Backend shutting down...")


app = FastAPI(
    title="SlugSpace",
    description="Club discovery, study groups and college matching for students",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(SlugSpaceError)
async def general_error_handler(request: Request, exc: SlugSpaceError):
    """Handle all other application errors."""
    logger.error(f"Unhandled application error: {exc.message} ({exc.details})")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "slugspace"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "SlugSpace API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from app.api.routes import recommendations, colleges  # noqa: E402

app.include_router(recommendations.router)
app.include_router(colleges.router)
