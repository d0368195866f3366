"""Dealership API settings, read from the environment and an optional ``.env``."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import logger

# .env lives at the project root, next to run.py
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Supabase project: tables and the image bucket
    supabase_url: str = Field(..., validation_alias="SUPABASE_URL")
    supabase_key: str = Field(..., validation_alias="SUPABASE_KEY")
    storage_bucket: str = Field(
        default="vehicle-images", validation_alias="SUPABASE_STORAGE_BUCKET"
    )

    # Back office
    api_admin_key: str = Field(default="", validation_alias="API_ADMIN_KEY")

    # Public site
    allowed_origins: list[str] | str = Field(
        default=["http://localhost:5173"],
        validation_alias="ALLOWED_ORIGINS",
    )
    rate_limit_leads: str = Field(default="10/minute", validation_alias="RATE_LIMIT_LEADS")
    loan_zero_rate_policy: Literal["flat", "non_finite"] = Field(
        default="flat", validation_alias="LOAN_ZERO_RATE_POLICY"
    )
    options_cache_ttl: int = Field(default=300, gt=0, validation_alias="OPTIONS_CACHE_TTL")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def cors_origins(self) -> list[str]:
        """ALLOWED_ORIGINS as a list; accepts a JSON list or a comma-separated string."""
        if isinstance(self.allowed_origins, str):
            return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return self.allowed_origins


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def validate_settings() -> None:
    """Fail start-up with every configuration problem listed at once.

    Raises:
        ValueError: "Configuration errors: ..." naming each bad variable
    """
    settings = get_settings()
    errors = []

    if not settings.supabase_url:
        errors.append("SUPABASE_URL is required")
    elif not settings.supabase_url.startswith(("https://", "http://")):
        errors.append("SUPABASE_URL must be an http(s) URL")
    if not settings.supabase_key:
        errors.append("SUPABASE_KEY is required")
    if not settings.storage_bucket:
        errors.append("SUPABASE_STORAGE_BUCKET must not be empty")

    if errors:
        raise ValueError(f"Configuration errors: {'; '.join(errors)}")

    if not settings.api_admin_key:
        logger.warning("API_ADMIN_KEY is not set; admin endpoints will answer 503")
