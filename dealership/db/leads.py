"""Supabase operations on the lead tables (sell, finance, order, contact)."""

import time
from typing import Any

from supabase import Client

from ..core.enums import LeadKind, LeadStatus
from ..core.logging import log_db_query
from ..utils.converters import as_rows, first_row
from .stock import TABLE as STOCK_TABLE


def insert_lead(client: Client, kind: LeadKind, lead: dict[str, Any]) -> dict[str, Any] | None:
    """Insert a customer request. Status is left to the table default (``new``)."""
    table = LeadKind(kind).table
    start = time.time()
    result = client.table(table).insert(lead).execute()
    log_db_query("insert", table, (time.time() - start) * 1000)
    return first_row(result.data)


def list_leads(
    client: Client, kind: LeadKind, status: LeadStatus | None = None
) -> list[dict[str, Any]]:
    """Leads of one kind, newest first, optionally filtered by status."""
    table = LeadKind(kind).table
    start = time.time()
    query = client.table(table).select("*")
    if status is not None:
        query = query.eq("status", LeadStatus(status).value)
    result = query.order("created_at", desc=True).execute()
    rows = as_rows(result.data)
    log_db_query("list", table, (time.time() - start) * 1000, rows=len(rows))
    return rows


def set_lead_status(
    client: Client, kind: LeadKind, lead_id: str, status: LeadStatus
) -> dict[str, Any] | None:
    table = LeadKind(kind).table
    start = time.time()
    result = (
        client.table(table)
        .update({"status": LeadStatus(status).value})
        .eq("id", lead_id)
        .execute()
    )
    log_db_query("set_status", table, (time.time() - start) * 1000)
    return first_row(result.data)


def _count(client: Client, table: str) -> int:
    result = client.table(table).select("id", count="exact").limit(1).execute()
    return result.count or 0


def get_dashboard_stats(client: Client) -> dict[str, int]:
    """Row counts for the admin dashboard."""
    start = time.time()
    stats = {"stock_count": _count(client, STOCK_TABLE)}
    for kind in LeadKind:
        stats[f"{kind.value}_leads_count"] = _count(client, kind.table)
    log_db_query("dashboard_stats", "*", (time.time() - start) * 1000)
    return stats
