"""Supabase operations on the ``stock`` table.

All functions are synchronous and take the client explicitly; API handlers
run them in a worker thread. Supabase errors propagate to the caller.
"""

import time
from datetime import datetime, timezone
from typing import Any

from supabase import Client

from ..core.enums import StockStatus
from ..core.logging import log_db_query
from ..utils.converters import as_rows, first_row

TABLE = "stock"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def list_active_vehicles(client: Client) -> list[dict[str, Any]]:
    """Vehicles shown on the public site, newest first."""
    start = time.time()
    result = (
        client.table(TABLE)
        .select("*")
        .eq("status", StockStatus.ACTIVE.value)
        .order("created_at", desc=True)
        .execute()
    )
    rows = as_rows(result.data)
    log_db_query("list_active", TABLE, (time.time() - start) * 1000, rows=len(rows))
    return rows


def list_all_vehicles(client: Client) -> list[dict[str, Any]]:
    """Every vehicle regardless of status, newest first (admin view)."""
    start = time.time()
    result = client.table(TABLE).select("*").order("created_at", desc=True).execute()
    rows = as_rows(result.data)
    log_db_query("list_all", TABLE, (time.time() - start) * 1000, rows=len(rows))
    return rows


def get_vehicle(client: Client, vehicle_id: str) -> dict[str, Any] | None:
    start = time.time()
    result = client.table(TABLE).select("*").eq("id", vehicle_id).limit(1).execute()
    log_db_query("get", TABLE, (time.time() - start) * 1000)
    return first_row(result.data)


def create_vehicle(client: Client, vehicle: dict[str, Any]) -> dict[str, Any] | None:
    start = time.time()
    result = client.table(TABLE).insert(vehicle).execute()
    log_db_query("insert", TABLE, (time.time() - start) * 1000)
    return first_row(result.data)


def update_vehicle(
    client: Client, vehicle_id: str, updates: dict[str, Any]
) -> dict[str, Any] | None:
    """Patch a vehicle and stamp ``updated_at``. Returns the updated row."""
    start = time.time()
    payload = {**updates, "updated_at": utc_now_iso()}
    result = client.table(TABLE).update(payload).eq("id", vehicle_id).execute()
    log_db_query("update", TABLE, (time.time() - start) * 1000)
    return first_row(result.data)


def delete_vehicle(client: Client, vehicle_id: str) -> bool:
    """Delete a vehicle. Returns False when no row matched."""
    start = time.time()
    result = client.table(TABLE).delete().eq("id", vehicle_id).execute()
    log_db_query("delete", TABLE, (time.time() - start) * 1000)
    return bool(as_rows(result.data))


def set_vehicle_status(
    client: Client, vehicle_id: str, status: StockStatus
) -> dict[str, Any] | None:
    return update_vehicle(client, vehicle_id, {"status": StockStatus(status).value})


def fetch_brand_model_rows(client: Client) -> list[dict[str, Any]]:
    """Read ``(id, marca, model, created_at)`` for every stock row."""
    start = time.time()
    result = (
        client.table(TABLE)
        .select("id, marca, model, created_at")
        .order("created_at", desc=True)
        .execute()
    )
    rows = as_rows(result.data)
    log_db_query("fetch_brand_model", TABLE, (time.time() - start) * 1000, rows=len(rows))
    return rows


def update_brand_model(client: Client, vehicle_id: Any, brand: str, model: str) -> None:
    """Write back a reconciled brand/model pair for one row."""
    start = time.time()
    (
        client.table(TABLE)
        .update({"marca": brand, "model": model, "updated_at": utc_now_iso()})
        .eq("id", vehicle_id)
        .execute()
    )
    log_db_query("update_brand_model", TABLE, (time.time() - start) * 1000)
