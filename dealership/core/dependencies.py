"""FastAPI dependency injection for services."""

import secrets
import time
from typing import Annotated, Any

from fastapi import Depends, Header, HTTPException, Request

from supabase import Client

from ..db.client import get_supabase_client
from ..services.loan_calculator import ZeroRatePolicy
from .config import Settings, get_settings
from .logging import log_db_query, log_external_call, logger

# -----------------------------------------------------------------------------
# Supabase Client
# -----------------------------------------------------------------------------


def get_supabase() -> Client:
    """Dependency for the shared Supabase client."""
    return get_supabase_client()


# -----------------------------------------------------------------------------
# Finance calculator
# -----------------------------------------------------------------------------


def get_zero_rate_policy(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ZeroRatePolicy:
    """Dependency for the configured 0% rate behaviour."""
    return ZeroRatePolicy(settings.loan_zero_rate_policy)


# -----------------------------------------------------------------------------
# Admin Authentication
# -----------------------------------------------------------------------------


async def verify_admin_key(
    request: Request,
    x_admin_key: Annotated[str | None, Header()] = None,
    settings: Settings = Depends(get_settings),
) -> bool:
    """Verify admin API key for the back-office endpoints."""
    if not settings.api_admin_key:
        logger.warning("API_ADMIN_KEY not set - admin endpoints disabled")
        raise HTTPException(
            status_code=503,
            detail="Admin endpoints not configured. Set API_ADMIN_KEY environment variable.",
        )

    if not x_admin_key:
        raise HTTPException(
            status_code=401,
            detail="Missing X-Admin-Key header",
        )

    if not secrets.compare_digest(x_admin_key, settings.api_admin_key):
        logger.warning(f"Invalid admin key attempt from {request.client}")
        raise HTTPException(
            status_code=403,
            detail="Invalid admin key",
        )

    return True


# -----------------------------------------------------------------------------
# Health Check Helpers
# -----------------------------------------------------------------------------


async def check_supabase_health(supabase: Client) -> dict[str, Any]:
    """Check Supabase connectivity."""
    start = time.time()
    try:
        supabase.table("stock").select("id").limit(1).execute()
        duration_ms = (time.time() - start) * 1000
        log_db_query("health_check", "stock", duration_ms)
        return {
            "status": "healthy",
            "latency_ms": round(duration_ms, 2),
        }
    except Exception as e:
        duration_ms = (time.time() - start) * 1000
        log_external_call("supabase", "health_check", False, duration_ms)
        return {
            "status": "unhealthy",
            "error": str(e),
            "latency_ms": round(duration_ms, 2),
        }
