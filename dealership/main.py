"""FastAPI application for the dealership website and back office."""

import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from .api.admin import router as admin_router
from .api.rate_limit import limiter
from .api.routes import router
from .core.config import get_settings, validate_settings
from .core.dependencies import check_supabase_health, get_supabase
from .core.logging import log_error, log_request, log_response, logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - validate configuration on startup."""
    logger.info("Starting Dealership API...")
    try:
        validate_settings()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Dealership API",
    description="Stock listing, financing calculator, lead forms and admin back office",
    version="1.0.0",
    lifespan=lifespan,
)

# State for limiter
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    log_error("Rate limit exceeded", client=get_remote_address(request))
    return _rate_limit_exceeded_handler(request, exc)


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Admin-Key"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    log_request(request.method, request.url.path)

    response = await call_next(request)

    duration_ms = (time.time() - start) * 1000
    log_response(request.method, request.url.path, response.status_code, duration_ms)

    return response


# Routes
app.include_router(router, prefix="/api")
app.include_router(admin_router, prefix="/api/admin")


class HealthResponse(BaseModel):
    status: str
    supabase: dict | None = None


@app.get("/health", response_model=HealthResponse)
async def health_check(detailed: bool = False, supabase=Depends(get_supabase)):
    """
    Health check endpoint.

    - Basic: Returns {"status": "healthy"}
    - Detailed (?detailed=true): Checks Supabase connectivity
    """
    if not detailed:
        return {"status": "healthy"}

    supabase_health = await check_supabase_health(supabase)
    overall = "healthy" if supabase_health["status"] == "healthy" else "degraded"
    return {"status": overall, "supabase": supabase_health}
