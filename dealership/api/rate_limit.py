"""Shared slowapi limiter for the public forms."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def lead_rate_limit() -> str:
    """Per-IP limit for lead submissions, read from settings at request time."""
    return get_settings().rate_limit_leads
