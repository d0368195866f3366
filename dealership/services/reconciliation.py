"""Stock brand/model maintenance jobs.

``reconcile_stock_brands`` rewrites every stock row onto its closest catalog
pair; ``audit_stock_brands`` only reports which rows are not canonical.

Rows are processed strictly one after another. A failure on one row is
recorded and the job moves on; there is no transaction and no rollback, so a
partially applied run is an expected outcome and is reported as such.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from supabase import Client

from ..core.logging import log_error, logger
from ..data.car_brands import CAR_BRANDS, CarBrand
from ..db.stock import fetch_brand_model_rows, update_brand_model
from .brand_reconciler import (
    MatchKind,
    check_catalog_compatibility,
    find_closest_brand_and_model,
)

ProgressCallback = Callable[[str], None]

MISSING_BRAND_MODEL = "missing marca/model"


@dataclass(frozen=True)
class RowError:
    id: Any
    message: str


@dataclass(frozen=True)
class BrandChange:
    id: Any
    old_brand: str
    old_model: str
    new_brand: str
    new_model: str
    kind: MatchKind


@dataclass
class ReconciliationReport:
    dry_run: bool = False
    attempted: int = 0
    changed: int = 0
    unchanged: int = 0
    errors: list[RowError] = field(default_factory=list)
    changes: list[BrandChange] = field(default_factory=list)

    @property
    def errored(self) -> int:
        return len(self.errors)


@dataclass(frozen=True)
class IncompatibleRow:
    id: Any
    marca: str
    model: str
    brand_exists: bool
    model_exists: bool


@dataclass
class AuditReport:
    total: int = 0
    by_brand: dict[str, int] = field(default_factory=dict)
    compatible: int = 0
    incompatible: list[IncompatibleRow] = field(default_factory=list)


def _noop(_: str) -> None:
    return None


def reconcile_stock_brands(
    client: Client,
    catalog: Sequence[CarBrand] = CAR_BRANDS,
    dry_run: bool = False,
    progress: ProgressCallback = _noop,
) -> ReconciliationReport:
    """Map every stock row onto the catalog, writing back only changed rows.

    Args:
        client: Supabase client
        catalog: Ordered brand catalog
        dry_run: Compute and report changes without writing them
        progress: Receives one human-readable line per row

    Returns:
        ReconciliationReport with counts, applied changes and per-row errors

    Raises:
        Exception: only when the initial read of the stock table fails
    """
    report = ReconciliationReport(dry_run=dry_run)
    rows = fetch_brand_model_rows(client)
    logger.info(f"Reconciling {len(rows)} stock rows (dry_run={dry_run})")

    for row in rows:
        report.attempted += 1
        row_id = row.get("id")
        if row.get("marca") is None or row.get("model") is None:
            # An empty pair would substring-match the first catalog entry
            report.errors.append(RowError(row_id, MISSING_BRAND_MODEL))
            log_error("Brand reconciliation skipped row", row_id=row_id)
            continue

        old_brand = str(row["marca"])
        old_model = str(row["model"])
        try:
            match = find_closest_brand_and_model(old_brand, old_model, catalog)
            if not match.differs_from(old_brand, old_model):
                report.unchanged += 1
                progress(f"Already canonical: {old_brand} {old_model}")
                continue

            if not dry_run:
                update_brand_model(client, row_id, match.brand, match.model)
            report.changed += 1
            report.changes.append(
                BrandChange(row_id, old_brand, old_model, match.brand, match.model, match.kind)
            )
            progress(
                f"Updated ({match.kind.value}): {old_brand} {old_model} -> "
                f"{match.brand} {match.model}"
            )
        except Exception as e:
            report.errors.append(RowError(row_id, str(e)))
            log_error("Brand reconciliation failed", e, row_id=row_id)

    logger.info(
        f"Reconciliation done attempted={report.attempted} changed={report.changed} "
        f"errored={report.errored}"
    )
    return report


def audit_stock_brands(
    client: Client, catalog: Sequence[CarBrand] = CAR_BRANDS
) -> AuditReport:
    """Report stored brands and rows whose pair is not in the catalog verbatim."""
    rows = fetch_brand_model_rows(client)
    report = AuditReport(total=len(rows))
    report.by_brand = dict(Counter(str(row.get("marca") or "") for row in rows))

    for row in rows:
        marca = str(row.get("marca") or "")
        model = str(row.get("model") or "")
        compatibility = check_catalog_compatibility(marca, model, catalog)
        if compatibility.compatible:
            report.compatible += 1
        else:
            report.incompatible.append(
                IncompatibleRow(
                    id=row.get("id"),
                    marca=marca,
                    model=model,
                    brand_exists=compatibility.brand_exists,
                    model_exists=compatibility.model_exists,
                )
            )
    return report
