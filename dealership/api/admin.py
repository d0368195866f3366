"""Back-office routes. Every endpoint requires the X-Admin-Key header."""

import asyncio
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from supabase import Client

from ..core.config import Settings, get_settings
from ..core.dependencies import get_supabase, verify_admin_key
from ..core.enums import LeadKind, LeadStatus, SettingsTable
from ..core.logging import log_admin_action, log_error
from ..db import leads as leads_db
from ..db import settings as settings_db
from ..db import stock as stock_db
from ..db.storage import ImageUpload, StorageValidationError, upload_vehicle_images
from ..models.leads import LeadStatusUpdate
from ..models.settings import FormOptionIn, KeyedSettingIn, SettingUpdate
from ..models.stock import StockStatusUpdate, StockVehicleCreate, StockVehicleUpdate
from ..services.options_cache import get_options_cache
from ..services.reconciliation import audit_stock_brands, reconcile_stock_brands

router = APIRouter(dependencies=[Depends(verify_admin_key)])

SupabaseDep = Annotated[Client, Depends(get_supabase)]


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


@router.get("/stats")
async def dashboard_stats(supabase: SupabaseDep):
    try:
        return await asyncio.to_thread(leads_db.get_dashboard_stats, supabase)
    except Exception as e:
        log_error("Failed to load dashboard stats", e)
        raise HTTPException(status_code=500, detail="Failed to load dashboard stats")


# ---------------------------------------------------------------------------
# Stock CRUD
# ---------------------------------------------------------------------------


@router.get("/stock")
async def list_all_stock(supabase: SupabaseDep):
    try:
        vehicles = await asyncio.to_thread(stock_db.list_all_vehicles, supabase)
    except Exception as e:
        log_error("Failed to list stock", e)
        raise HTTPException(status_code=500, detail="Failed to retrieve stock")
    return {"vehicles": vehicles, "total": len(vehicles)}


@router.post("/stock", status_code=201)
async def create_stock_vehicle(body: StockVehicleCreate, supabase: SupabaseDep):
    try:
        row = await asyncio.to_thread(
            stock_db.create_vehicle, supabase, body.model_dump(mode="json")
        )
    except Exception as e:
        log_error("Failed to create vehicle", e, marca=body.marca, model=body.model)
        raise HTTPException(status_code=500, detail="Failed to create vehicle")
    log_admin_action(
        "stock.create", id=row.get("id") if row else None, marca=body.marca, model=body.model
    )
    return row


@router.patch("/stock/{vehicle_id}")
async def update_stock_vehicle(
    vehicle_id: str, body: StockVehicleUpdate, supabase: SupabaseDep
):
    updates = body.model_dump(mode="json", exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        row = await asyncio.to_thread(stock_db.update_vehicle, supabase, vehicle_id, updates)
    except Exception as e:
        log_error("Failed to update vehicle", e, vehicle_id=vehicle_id)
        raise HTTPException(status_code=500, detail="Failed to update vehicle")
    if row is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    log_admin_action("stock.update", id=vehicle_id, fields=",".join(sorted(updates)))
    return row


@router.patch("/stock/{vehicle_id}/status")
async def update_stock_status(
    vehicle_id: str, body: StockStatusUpdate, supabase: SupabaseDep
):
    try:
        row = await asyncio.to_thread(
            stock_db.set_vehicle_status, supabase, vehicle_id, body.status
        )
    except Exception as e:
        log_error("Failed to update vehicle status", e, vehicle_id=vehicle_id)
        raise HTTPException(status_code=500, detail="Failed to update vehicle status")
    if row is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    log_admin_action("stock.status", id=vehicle_id, status=body.status.value)
    return row


@router.delete("/stock/{vehicle_id}", status_code=204)
async def delete_stock_vehicle(vehicle_id: str, supabase: SupabaseDep):
    try:
        deleted = await asyncio.to_thread(stock_db.delete_vehicle, supabase, vehicle_id)
    except Exception as e:
        log_error("Failed to delete vehicle", e, vehicle_id=vehicle_id)
        raise HTTPException(status_code=500, detail="Failed to delete vehicle")
    if not deleted:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    log_admin_action("stock.delete", id=vehicle_id)


@router.post("/stock/images", status_code=201)
async def upload_stock_images(
    supabase: SupabaseDep,
    settings: Annotated[Settings, Depends(get_settings)],
    files: list[UploadFile] = File(...),
):
    """Upload vehicle photos to the storage bucket and return their public URLs."""
    uploads = [
        ImageUpload(
            filename=f.filename or "upload",
            content_type=f.content_type or "application/octet-stream",
            content=await f.read(),
        )
        for f in files
    ]
    try:
        urls = await asyncio.to_thread(
            upload_vehicle_images, supabase, settings.storage_bucket, uploads
        )
    except StorageValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log_error("Image upload failed", e, count=len(uploads))
        raise HTTPException(status_code=500, detail="Failed to upload images")
    return {"urls": urls}


# ---------------------------------------------------------------------------
# Leads
# ---------------------------------------------------------------------------


@router.get("/leads/{kind}")
async def list_leads(kind: LeadKind, supabase: SupabaseDep, status: Optional[LeadStatus] = None):
    try:
        leads = await asyncio.to_thread(leads_db.list_leads, supabase, kind, status)
    except Exception as e:
        log_error("Failed to list leads", e, kind=kind.value)
        raise HTTPException(status_code=500, detail="Failed to retrieve leads")
    return {"leads": leads, "total": len(leads)}


@router.patch("/leads/{kind}/{lead_id}/status")
async def update_lead_status(
    kind: LeadKind, lead_id: str, body: LeadStatusUpdate, supabase: SupabaseDep
):
    try:
        row = await asyncio.to_thread(
            leads_db.set_lead_status, supabase, kind, lead_id, body.status
        )
    except Exception as e:
        log_error("Failed to update lead status", e, kind=kind.value, lead_id=lead_id)
        raise HTTPException(status_code=500, detail="Failed to update lead status")
    if row is None:
        raise HTTPException(status_code=404, detail="Lead not found")
    log_admin_action("lead.status", kind=kind.value, id=lead_id, status=body.status.value)
    return row


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@router.get("/settings")
async def get_admin_settings(supabase: SupabaseDep):
    try:
        return await asyncio.to_thread(settings_db.load_admin_config, supabase)
    except Exception as e:
        log_error("Failed to load settings", e)
        raise HTTPException(status_code=500, detail="Failed to load settings")


@router.post("/settings/form_options", status_code=201)
async def create_form_option(body: FormOptionIn, supabase: SupabaseDep):
    return await _insert_setting(supabase, SettingsTable.FORM_OPTIONS, body.model_dump())


@router.post("/settings/{table}", status_code=201)
async def create_keyed_setting(table: SettingsTable, body: KeyedSettingIn, supabase: SupabaseDep):
    return await _insert_setting(supabase, table, body.model_dump())


@router.patch("/settings/{table}/{row_id}")
async def update_setting(
    table: SettingsTable, row_id: str, body: SettingUpdate, supabase: SupabaseDep
):
    updates = body.model_dump(exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        row = await asyncio.to_thread(
            settings_db.update_setting, supabase, table, row_id, updates
        )
    except Exception as e:
        log_error("Failed to update setting", e, table=table.value, row_id=row_id)
        raise HTTPException(status_code=500, detail="Failed to update setting")
    get_options_cache().clear()
    if row is None:
        raise HTTPException(status_code=404, detail="Setting not found")
    log_admin_action("settings.update", table=table.value, id=row_id)
    return row


@router.delete("/settings/{table}/{row_id}", status_code=204)
async def delete_setting(table: SettingsTable, row_id: str, supabase: SupabaseDep):
    try:
        deleted = await asyncio.to_thread(settings_db.delete_setting, supabase, table, row_id)
    except Exception as e:
        log_error("Failed to delete setting", e, table=table.value, row_id=row_id)
        raise HTTPException(status_code=500, detail="Failed to delete setting")
    get_options_cache().clear()
    if not deleted:
        raise HTTPException(status_code=404, detail="Setting not found")
    log_admin_action("settings.delete", table=table.value, id=row_id)


async def _insert_setting(supabase: Client, table: SettingsTable, data: dict) -> dict:
    try:
        row = await asyncio.to_thread(settings_db.insert_setting, supabase, table, data)
    except Exception as e:
        log_error("Failed to create setting", e, table=table.value)
        raise HTTPException(status_code=500, detail="Failed to create setting")
    get_options_cache().clear()
    log_admin_action("settings.create", table=table.value, id=row.get("id") if row else None)
    return row or {}


# ---------------------------------------------------------------------------
# Maintenance
# ---------------------------------------------------------------------------


@router.post("/maintenance/reconcile-brands")
async def reconcile_brands(supabase: SupabaseDep, dry_run: bool = True):
    """Rewrite stock brand/model pairs onto the catalog. Dry run by default."""
    try:
        report = await asyncio.to_thread(reconcile_stock_brands, supabase, dry_run=dry_run)
    except Exception as e:
        log_error("Brand reconciliation could not start", e)
        raise HTTPException(status_code=500, detail="Failed to read stock")
    if not dry_run:
        log_admin_action(
            "stock.reconcile_brands", changed=report.changed, errored=report.errored
        )
    return {
        "dry_run": report.dry_run,
        "attempted": report.attempted,
        "changed": report.changed,
        "unchanged": report.unchanged,
        "errored": report.errored,
        "changes": [
            {
                "id": c.id,
                "from": {"marca": c.old_brand, "model": c.old_model},
                "to": {"marca": c.new_brand, "model": c.new_model},
                "match": c.kind.value,
            }
            for c in report.changes
        ],
        "errors": [{"id": err.id, "error": err.message} for err in report.errors],
    }


@router.get("/maintenance/brand-audit")
async def brand_audit(supabase: SupabaseDep):
    try:
        report = await asyncio.to_thread(audit_stock_brands, supabase)
    except Exception as e:
        log_error("Brand audit failed", e)
        raise HTTPException(status_code=500, detail="Failed to read stock")
    return {
        "total": report.total,
        "by_brand": report.by_brand,
        "compatible": report.compatible,
        "incompatible": [
            {
                "id": row.id,
                "marca": row.marca,
                "model": row.model,
                "brand_exists": row.brand_exists,
                "model_exists": row.model_exists,
            }
            for row in report.incompatible
        ],
    }
