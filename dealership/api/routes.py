"""Public API routes: stock listing, catalog, finance calculator and lead forms."""

import asyncio
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from supabase import Client

from ..core.dependencies import get_supabase, get_zero_rate_policy
from ..core.enums import (
    SUBMIT_ERROR_MESSAGE,
    LeadKind,
    SortDirection,
    SortField,
    StockStatus,
)
from ..core.logging import log_error, log_lead_submitted
from ..data.car_brands import get_brands, get_models_for_brand
from ..db import leads as leads_db
from ..db import stock as stock_db
from ..db.settings import load_admin_config
from ..models.finance import FinanceQuoteRequest, LoanQuoteResponse
from ..models.leads import (
    ContactMessageCreate,
    FinanceLeadCreate,
    OrderLeadCreate,
    SellLeadCreate,
)
from ..services.loan_calculator import InvalidArgument, ZeroRatePolicy, quote_vehicle_financing
from ..services.options_cache import get_options_cache
from ..services.stock_listing import (
    DEFAULT_PAGE_SIZE,
    VehicleFilters,
    get_ranges,
    search_stock,
)
from .rate_limit import lead_rate_limit, limiter

router = APIRouter()

SupabaseDep = Annotated[Client, Depends(get_supabase)]


# ---------------------------------------------------------------------------
# Stock
# ---------------------------------------------------------------------------


def stock_filters(
    brand: Optional[str] = None,
    model: Optional[str] = None,
    body_type: Optional[str] = None,
    fuel_type: Optional[str] = None,
    transmission: Optional[str] = None,
    year_min: Optional[int] = None,
    year_max: Optional[int] = None,
    mileage_min: Optional[int] = Query(default=None, ge=0),
    mileage_max: Optional[int] = Query(default=None, ge=0),
    price_min: Optional[float] = Query(default=None, ge=0),
    price_max: Optional[float] = Query(default=None, ge=0),
    search: Optional[str] = Query(default=None, max_length=100),
) -> VehicleFilters:
    return VehicleFilters(
        brand=brand,
        model=model,
        body_type=body_type,
        fuel_type=fuel_type,
        transmission=transmission,
        year_min=year_min,
        year_max=year_max,
        mileage_min=mileage_min,
        mileage_max=mileage_max,
        price_min=price_min,
        price_max=price_max,
        search=search,
    )


@router.get("/stock")
async def list_stock(
    supabase: SupabaseDep,
    filters: Annotated[VehicleFilters, Depends(stock_filters)],
    sort: SortField = SortField.DATE_ADDED,
    direction: SortDirection = SortDirection.DESC,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=100),
):
    """Active vehicles, filtered, sorted and paginated."""
    try:
        rows = await asyncio.to_thread(stock_db.list_active_vehicles, supabase)
    except Exception as e:
        log_error("Failed to list stock", e)
        raise HTTPException(status_code=500, detail="Failed to retrieve stock")

    result = search_stock(rows, filters, sort, direction, page, limit)
    result["ranges"] = get_ranges(rows)
    return result


@router.get("/stock/{vehicle_id}")
async def get_stock_vehicle(vehicle_id: str, supabase: SupabaseDep):
    try:
        vehicle = await asyncio.to_thread(stock_db.get_vehicle, supabase, vehicle_id)
    except Exception as e:
        log_error("Failed to get vehicle", e, vehicle_id=vehicle_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve vehicle")

    if vehicle is None or vehicle.get("status") != StockStatus.ACTIVE.value:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle


# ---------------------------------------------------------------------------
# Catalog and form options
# ---------------------------------------------------------------------------


@router.get("/brands")
async def list_brands():
    return {"brands": get_brands()}


@router.get("/brands/{brand}/models")
async def list_models(brand: str):
    models = get_models_for_brand(brand)
    if not models:
        raise HTTPException(status_code=404, detail=f"Unknown brand: {brand}")
    return {"brand": brand, "models": models}


@router.get("/options")
async def get_form_options(supabase: SupabaseDep):
    """Dropdown options, form texts and site settings, cached."""
    cache = get_options_cache()
    try:
        return await asyncio.to_thread(
            cache.get_or_load, "admin_config", lambda: load_admin_config(supabase)
        )
    except Exception as e:
        log_error("Failed to load form options", e)
        raise HTTPException(status_code=500, detail="Failed to retrieve options")


# ---------------------------------------------------------------------------
# Finance calculator
# ---------------------------------------------------------------------------


@router.post("/finance/quote", response_model=LoanQuoteResponse)
async def finance_quote(
    body: FinanceQuoteRequest,
    policy: Annotated[ZeroRatePolicy, Depends(get_zero_rate_policy)],
):
    """Monthly payment, totals and approximate APR for a vehicle loan."""
    try:
        quote = quote_vehicle_financing(
            body.price,
            body.down_payment,
            body.term_months,
            body.annual_rate_percent,
            zero_rate_policy=policy,
        )
    except InvalidArgument as e:
        raise HTTPException(status_code=422, detail=str(e))
    return LoanQuoteResponse.from_quote(quote)


# ---------------------------------------------------------------------------
# Lead forms
# ---------------------------------------------------------------------------


async def _submit_lead(supabase: Client, kind: LeadKind, payload: dict[str, Any]) -> dict:
    try:
        row = await asyncio.to_thread(leads_db.insert_lead, supabase, kind, payload)
    except Exception as e:
        log_error("Lead submission failed", e, kind=kind.value)
        raise HTTPException(status_code=500, detail=SUBMIT_ERROR_MESSAGE)

    lead_id = row.get("id") if row else None
    log_lead_submitted(kind.value, lead_id)
    return {"success": True, "id": lead_id}


@router.post("/leads/sell", status_code=201)
@limiter.limit(lead_rate_limit)
async def submit_sell_lead(request: Request, body: SellLeadCreate, supabase: SupabaseDep):
    return await _submit_lead(supabase, LeadKind.SELL, body.model_dump(mode="json"))


@router.post("/leads/finance", status_code=201)
@limiter.limit(lead_rate_limit)
async def submit_finance_lead(
    request: Request, body: FinanceLeadCreate, supabase: SupabaseDep
):
    payload = body.model_dump(mode="json")
    if not payload.get("link_stoc"):
        payload["link_stoc"] = None
    return await _submit_lead(supabase, LeadKind.FINANCE, payload)


@router.post("/leads/order", status_code=201)
@limiter.limit(lead_rate_limit)
async def submit_order_lead(request: Request, body: OrderLeadCreate, supabase: SupabaseDep):
    return await _submit_lead(supabase, LeadKind.ORDER, body.model_dump(mode="json"))


@router.post("/contact", status_code=201)
@limiter.limit(lead_rate_limit)
async def submit_contact_message(
    request: Request, body: ContactMessageCreate, supabase: SupabaseDep
):
    return await _submit_lead(supabase, LeadKind.CONTACT, body.model_dump(mode="json"))
