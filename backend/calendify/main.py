"""
FastAPI Application Entry Point
--------------------------------
Creates the Calendify events API.

WHAT THIS FILE DOES:
1. Creates the FastAPI app instance
2. Sets up middleware (CORS)
3. Registers the events routes
4. Turns every error into {"error": "..."} with the right status code
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
import logging

from calendify.config import settings
from calendify.api import events
from calendify.db.database import check_db_connection, init_db
from calendify.utils.cors import CORS_HEADERS, cors_middleware


# ============================================================================
# LOGGING SETUP
# ============================================================================
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


# ============================================================================
# LIFESPAN EVENTS (Startup / Shutdown)
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: check the database and, outside production, create tables.
    Shutdown: nothing to release, sessions close per request.
    """
    logger.info("Starting Calendify API...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Database: {settings.DATABASE_URL.split('@')[-1]}")  # Hide password

    if not check_db_connection():
        logger.error("Failed to connect to database!")
        raise RuntimeError("Database connection failed")

    if not settings.is_production:
        init_db()

    logger.info("Application started successfully")

    yield

    logger.info("Shutting down Calendify API...")


# ============================================================================
# CREATE FASTAPI APP
# ============================================================================
app = FastAPI(
    title="Calendify API",
    description="Calendar events with an activity log",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


# ============================================================================
# MIDDLEWARE
# ============================================================================
app.middleware("http")(cors_middleware)


# ============================================================================
# HEALTH CHECK ENDPOINT
# ============================================================================
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for monitoring.

    TEST IT:
    curl http://localhost:8000/health
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": VERSION
        }
    )


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint with welcome message."""
    return {
        "message": "Welcome to Calendify API",
        "events": f"{settings.API_PREFIX}/events",
        "docs": "/docs",
        "health": "/health",
        "version": VERSION
    }


# ============================================================================
# REGISTER ROUTES
# ============================================================================
app.include_router(events.router, prefix=settings.API_PREFIX, tags=["Events"])


# ============================================================================
# ERROR HANDLERS
# ============================================================================
def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or null body keys, unparseable JSON, non-numeric id."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid input data")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Route-level errors. A method the resource doesn't support is a 400."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request method")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Storage failures. The real error goes to the log only; clients get a
    generic message.
    """
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error occurred")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch all unhandled exceptions.

    This runs outside the CORS middleware, so the headers are added here.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=CORS_HEADERS
    )


# ============================================================================
# RUN APPLICATION (for development)
# ============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "calendify.main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.BACKEND_RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
