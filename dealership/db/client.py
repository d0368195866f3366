"""Process-wide Supabase client shared by the API and the maintenance scripts."""

import threading
import time

from supabase import Client, create_client

from ..core.config import Settings, get_settings
from ..core.logging import log_external_call, logger

_supabase: Client | None = None
_client_lock = threading.Lock()


def _connect(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set")

    start = time.time()
    client = create_client(settings.supabase_url, settings.supabase_key)
    log_external_call("supabase", "create_client", True, (time.time() - start) * 1000)
    logger.info(f"Supabase client ready (storage bucket: {settings.storage_bucket})")
    return client


def get_supabase_client() -> Client:
    """Return the shared client, creating it on first use (thread-safe)."""
    global _supabase
    if _supabase is None:
        with _client_lock:
            if _supabase is None:
                _supabase = _connect(get_settings())
    return _supabase
