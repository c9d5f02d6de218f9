"""
Price Tiers API - FastAPI router for price tier management.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from ..services import PriceTierService
from .schemas import (
    PriceTierCreate,
    PriceTierUpdate,
    PriceTierResponse,
    QuoteResponse,
    DeleteResponse,
)
from .state import get_price_tier_service

router = APIRouter(prefix="/api/price-tiers", tags=["price-tiers"])


@router.get("", response_model=list[PriceTierResponse])
async def list_price_tiers(
    variantId: Optional[str] = None,
    service: PriceTierService = Depends(get_price_tier_service),
):
    """List a variant's price tiers, ascending by minimum quantity."""
    tiers = service.list_for_variant(variantId)
    return [PriceTierResponse(**t.__dict__) for t in tiers]


@router.get("/quote", response_model=QuoteResponse)
async def quote_price(
    variantId: Optional[str] = None,
    qty: Optional[str] = None,
    service: PriceTierService = Depends(get_price_tier_service),
):
    """Resolve the unit price that applies to an order quantity."""
    quote = service.quote(variantId, qty)
    return QuoteResponse(**quote.to_dict())


@router.post("", response_model=PriceTierResponse, status_code=201)
async def create_price_tier(
    tier_data: PriceTierCreate,
    service: PriceTierService = Depends(get_price_tier_service),
):
    """Create a new price tier."""
    tier = service.create(tier_data.variant_id, tier_data.min_qty, tier_data.price)
    return PriceTierResponse(**tier.__dict__)


@router.put("", response_model=PriceTierResponse)
async def update_price_tier(
    updates: PriceTierUpdate,
    service: PriceTierService = Depends(get_price_tier_service),
):
    """Update an existing price tier."""
    # exclude_unset keeps only the fields present in the request body
    update_dict = updates.model_dump(exclude_unset=True)
    tier_id = update_dict.pop('id', None)
    tier = service.update(tier_id, update_dict)
    return PriceTierResponse(**tier.__dict__)


@router.delete("", response_model=DeleteResponse)
async def delete_price_tier(
    id: Optional[str] = None,
    service: PriceTierService = Depends(get_price_tier_service),
):
    """Delete a price tier."""
    service.delete(id)
    return DeleteResponse(success=True)
