"""
Video catalog API: FastAPI application.

This is the entry point for the backend. It:
1. Creates the FastAPI app instance
2. Configures logging and CORS (so the web front end can talk to us)
3. Registers route handlers and the JSON error handlers
4. Sets up startup/shutdown lifecycle events

Run with:
    uvicorn app.main:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import database
from app.config import settings
from app.errors import APIError, ValidationError
from app.logging_config import setup_json_logging
from app.routers import auth, videos

setup_json_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Video Catalog API"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic.

    The database is NOT connected here: connect() runs lazily on the first
    request, so the server comes up (and /health can report the problem)
    even when MongoDB is down.
    """
    settings.check_token_settings()
    logger.info("Starting %s (%s)", SERVICE_NAME, settings.APP_ENV)

    yield  # App is running, handling requests

    database.close()
    logger.info("Shut down")


app = FastAPI(
    title=SERVICE_NAME,
    description="Catalog and account endpoints for the video-sharing front end",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(videos.router)


# --- Error handlers ---
# Every error body is {"message": ...}; the status code is what clients
# should branch on.

@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Body validation failures are 400s here, not FastAPI's default 422."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or "body",
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    error = ValidationError("Missing or invalid fields", errors=errors)
    logger.warning("Request validation failed", extra={"path": request.url.path})
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (404 unknown path, 405 wrong method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# --- Health Check Endpoints ---

@app.get("/", tags=["health"])
async def root():
    """Root endpoint — confirms the API is alive."""
    return {
        "service": SERVICE_NAME,
        "status": "running",
        "version": VERSION,
    }


@app.get("/health", tags=["health"])
def health_check():
    """Detailed health check — verifies database connectivity.

    Never fails: a broken database shows up as status "degraded".
    """
    try:
        database.connect().command("ping")
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {str(e)}"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "database": db_status,
        "environment": settings.APP_ENV,
    }
