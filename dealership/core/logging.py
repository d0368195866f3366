"""Logging for the API, the db layer and the maintenance scripts.

Everything goes through the ``dealership_api`` logger on stdout. The level is
read from ``LOG_LEVEL`` directly so that importing this module never requires
the Supabase settings to be present.
"""

import logging
import os
import sys
from typing import Any

# supabase-py talks HTTP through httpx, which logs every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the application logger once and return it."""
    logger = logging.getLogger("dealership_api")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger


logger = setup_logging(os.environ.get("LOG_LEVEL", "INFO"))


def _fields(**kwargs: Any) -> str:
    return " ".join(f"{k}={v}" for k, v in kwargs.items())


def log_request(method: str, path: str, **kwargs: Any) -> None:
    logger.info(f"REQUEST {method} {path} {_fields(**kwargs)}".strip())


def log_response(method: str, path: str, status: int, duration_ms: float) -> None:
    logger.info(f"RESPONSE {method} {path} status={status} duration_ms={duration_ms:.2f}")


def log_error(message: str, exc: Exception | None = None, **kwargs: Any) -> None:
    """Log an error, with traceback when an exception is given."""
    line = f"ERROR {message} {_fields(**kwargs)}".strip()
    if exc:
        logger.error(line, exc_info=exc)
    else:
        logger.error(line)


def log_db_query(
    operation: str,
    table: str,
    duration_ms: float | None = None,
    rows: int | None = None,
) -> None:
    """Log a Supabase table or storage operation at DEBUG."""
    parts = [f"DB {operation} table={table}"]
    if rows is not None:
        parts.append(f"rows={rows}")
    if duration_ms:
        parts.append(f"duration_ms={duration_ms:.2f}")
    logger.debug(" ".join(parts))


def log_external_call(
    service: str, operation: str, success: bool, duration_ms: float | None = None
) -> None:
    status = "success" if success else "failed"
    duration = f"duration_ms={duration_ms:.2f}" if duration_ms else ""
    logger.info(f"EXTERNAL {service} {operation} status={status} {duration}".strip())


def log_lead_submitted(kind: str, lead_id: Any) -> None:
    logger.info(f"LEAD {kind} id={lead_id}")


def log_admin_action(action: str, **kwargs: Any) -> None:
    """Audit line for every back-office write."""
    logger.info(f"ADMIN {action} {_fields(**kwargs)}".strip())
