"""Shared fixtures: environment, in-memory Supabase and an API test client."""

import os

import pytest

# Settings are read at import time by the app module
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")
os.environ["API_ADMIN_KEY"] = "test-admin-key"
os.environ["RATE_LIMIT_LEADS"] = "1000/minute"
os.environ["LOAN_ZERO_RATE_POLICY"] = "flat"

from fakes import FakeSupabase  # noqa: E402


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def api(fake_supabase):
    from fastapi.testclient import TestClient

    from dealership.core.dependencies import get_supabase
    from dealership.main import app
    from dealership.services.options_cache import get_options_cache

    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    get_options_cache().clear()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Key": "test-admin-key"}
