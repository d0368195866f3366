"""In-memory filtering, sorting and pagination for the public stock page."""

import math
from dataclasses import dataclass
from typing import Any

from ..core.enums import SortDirection, SortField
from ..utils.converters import safe_float, safe_int

DEFAULT_PAGE_SIZE = 12

# Row column backing each sort field
SORT_COLUMNS: dict[SortField, str] = {
    SortField.PRICE: "pret",
    SortField.YEAR: "an",
    SortField.MILEAGE: "km",
    SortField.DATE_ADDED: "created_at",
}


@dataclass
class VehicleFilters:
    brand: str | None = None
    model: str | None = None
    body_type: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    mileage_min: int | None = None
    mileage_max: int | None = None
    price_min: float | None = None
    price_max: float | None = None
    search: str | None = None


def _matches(row: dict[str, Any], filters: VehicleFilters) -> bool:
    # Brand and model are typed by the visitor: partial, any casing
    partial = (("marca", filters.brand), ("model", filters.model))
    for column, wanted in partial:
        if wanted and wanted.lower() not in str(row.get(column) or "").lower():
            return False

    exact = (
        ("caroserie", filters.body_type),
        ("combustibil", filters.fuel_type),
        ("transmisie", filters.transmission),
    )
    for column, wanted in exact:
        if wanted and row.get(column) != wanted:
            return False

    year = safe_int(row.get("an"))
    mileage = safe_int(row.get("km"))
    price = safe_float(row.get("pret"))
    bounds = (
        (year, filters.year_min, filters.year_max),
        (mileage, filters.mileage_min, filters.mileage_max),
        (price, filters.price_min, filters.price_max),
    )
    for value, low, high in bounds:
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False

    if filters.search:
        needle = filters.search.lower()
        haystack = (row.get("marca"), row.get("model"), row.get("descriere"))
        if not any(needle in str(text).lower() for text in haystack if text):
            return False

    return True


def filter_vehicles(
    rows: list[dict[str, Any]], filters: VehicleFilters
) -> list[dict[str, Any]]:
    return [row for row in rows if _matches(row, filters)]


def sort_vehicles(
    rows: list[dict[str, Any]],
    field: SortField = SortField.DATE_ADDED,
    direction: SortDirection = SortDirection.DESC,
) -> list[dict[str, Any]]:
    """Stable sort on one field; missing values sort as lowest."""
    column = SORT_COLUMNS[SortField(field)]

    def _key(row: dict[str, Any]) -> Any:
        if column == "created_at":
            return str(row.get(column) or "")
        return safe_float(row.get(column))

    return sorted(rows, key=_key, reverse=SortDirection(direction) is SortDirection.DESC)


def paginate(
    rows: list[dict[str, Any]], page: int = 1, limit: int = DEFAULT_PAGE_SIZE
) -> dict[str, Any]:
    """Slice one 1-based page out of the listing."""
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    total = len(rows)
    start = (page - 1) * limit
    return {
        "vehicles": rows[start : start + limit],
        "total": total,
        "page": page,
        "limit": limit,
        "total_pages": math.ceil(total / limit),
    }


def search_stock(
    rows: list[dict[str, Any]],
    filters: VehicleFilters,
    sort_field: SortField = SortField.DATE_ADDED,
    direction: SortDirection = SortDirection.DESC,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    """Filter, sort and paginate in one call."""
    filtered = filter_vehicles(rows, filters)
    return paginate(sort_vehicles(filtered, sort_field, direction), page, limit)


def get_ranges(rows: list[dict[str, Any]]) -> dict[str, dict[str, float] | None]:
    """Min/max of price, year and mileage, for the filter sliders."""
    ranges: dict[str, dict[str, float] | None] = {}
    for name, column in (("price", "pret"), ("year", "an"), ("mileage", "km")):
        values = [safe_float(row.get(column)) for row in rows if row.get(column) is not None]
        ranges[name] = {"min": min(values), "max": max(values)} if values else None
    return ranges
