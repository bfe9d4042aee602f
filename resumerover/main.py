"""
ResumeRover - FastAPI application entry point.

Upload a resume and a job posting, get back an ATS-style compatibility
report. Run with: uvicorn resumerover.main:app --reload
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager
from datetime import datetime
import logging
import os

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from . import __version__
from .config import settings
from .database import init_db
from .rate_limit import limiter
from .routers import analysis
from .services.errors import EngineError
from .services.taxonomy import TAXONOMY_VERSION

# --- Logging Configuration ---
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("resumerover")


def setup_database():
    """Create tables directly, or hand the schema to Alembic when migrations are enabled."""
    if settings.run_migrations:
        from alembic import command
        from alembic.config import Config

        logger.info("Running database migrations...")
        command.upgrade(Config("alembic.ini"), "head")
        logger.info("Migrations complete.")
    else:
        init_db()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    logger.info("Starting ResumeRover...")
    if settings.database_url.startswith("sqlite:///./data/"):
        os.makedirs("data", exist_ok=True)
    setup_database()
    logger.info(f"ResumeRover ready (taxonomy {TAXONOMY_VERSION})")
    yield
    logger.info("Shutting down ResumeRover...")


app = FastAPI(
    title="ResumeRover",
    description="ATS resume checker - match a resume against a job description and get actionable recommendations",
    version=__version__,
    lifespan=lifespan
)

# --- Rate Limiting ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(EngineError)
async def engine_error_handler(request: Request, exc: EngineError):
    """Map typed engine failures to their HTTP status with a stable error code."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# --- Security Headers Middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


# --- Middleware ---
# Parse allowed origins from config
_allowed_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(analysis.router, prefix="/api", tags=["analysis"])


@app.get("/api/health", tags=["system"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": __version__,
        "taxonomy_version": TAXONOMY_VERSION,
        "timestamp": datetime.utcnow().isoformat()
    }
