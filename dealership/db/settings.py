"""Supabase operations on the admin-editable configuration tables.

``form_options`` holds dropdown values (brands, fuel types, ...),
``form_texts`` holds labels and messages, ``site_settings`` holds contact
details, social links and SEO copy. Rows are grouped by their ``category``.
"""

import time
from collections import defaultdict
from typing import Any

from supabase import Client

from ..core.enums import SettingsTable
from ..core.logging import log_db_query
from ..utils.converters import as_rows, first_row, safe_int

# Sort key inside a category: options are ordered explicitly, texts/settings by key
_SECONDARY_ORDER: dict[SettingsTable, str] = {
    SettingsTable.FORM_OPTIONS: "order",
    SettingsTable.FORM_TEXTS: "key",
    SettingsTable.SITE_SETTINGS: "key",
}


def load_grouped(client: Client, table: SettingsTable) -> dict[str, list[dict[str, Any]]]:
    """Load one settings table grouped by category, in display order."""
    table = SettingsTable(table)
    start = time.time()
    result = (
        client.table(table.value)
        .select("*")
        .order("category")
        .order(_SECONDARY_ORDER[table])
        .execute()
    )
    log_db_query("load", table.value, (time.time() - start) * 1000)

    grouped: dict[str, list[dict[str, Any]]] = defaultdict(list)
    for row in as_rows(result.data):
        grouped[str(row.get("category", ""))].append(row)
    return dict(grouped)


def load_admin_config(client: Client) -> dict[str, dict[str, list[dict[str, Any]]]]:
    """All three configuration tables, keyed by table name."""
    return {table.value: load_grouped(client, table) for table in SettingsTable}


def _next_option_order(client: Client, category: str) -> int:
    result = (
        client.table(SettingsTable.FORM_OPTIONS.value)
        .select("order")
        .eq("category", category)
        .order("order", desc=True)
        .limit(1)
        .execute()
    )
    rows = as_rows(result.data)
    return safe_int(rows[0].get("order")) + 1 if rows else 1


def insert_setting(
    client: Client, table: SettingsTable, data: dict[str, Any]
) -> dict[str, Any] | None:
    """Insert a configuration row. New options go to the end of their category."""
    table = SettingsTable(table)
    payload = dict(data)
    if table is SettingsTable.FORM_OPTIONS and payload.get("order") is None:
        payload["order"] = _next_option_order(client, str(payload.get("category", "")))

    start = time.time()
    result = client.table(table.value).insert(payload).execute()
    log_db_query("insert", table.value, (time.time() - start) * 1000)
    return first_row(result.data)


def update_setting(
    client: Client, table: SettingsTable, row_id: str, data: dict[str, Any]
) -> dict[str, Any] | None:
    table = SettingsTable(table)
    start = time.time()
    result = client.table(table.value).update(data).eq("id", row_id).execute()
    log_db_query("update", table.value, (time.time() - start) * 1000)
    return first_row(result.data)


def delete_setting(client: Client, table: SettingsTable, row_id: str) -> bool:
    table = SettingsTable(table)
    start = time.time()
    result = client.table(table.value).delete().eq("id", row_id).execute()
    log_db_query("delete", table.value, (time.time() - start) * 1000)
    return bool(as_rows(result.data))
