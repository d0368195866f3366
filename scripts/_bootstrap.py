"""Shared start-up for maintenance scripts: path setup and Supabase client."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from dealership.core.config import get_settings
from dealership.db.client import get_supabase_client

MISSING_CREDENTIALS = "Error: SUPABASE_URL and SUPABASE_KEY environment variables are required"


def connect_or_exit():
    """Return the Supabase client, or exit 1 when configuration is unusable."""
    try:
        settings = get_settings()
    except ValidationError as e:
        if any(err["type"] == "missing" for err in e.errors()):
            print(MISSING_CREDENTIALS)
        else:
            print(f"Error: invalid configuration: {e}")
        sys.exit(1)

    if not settings.supabase_url or not settings.supabase_key:
        print(MISSING_CREDENTIALS)
        sys.exit(1)

    return get_supabase_client()
