"""
Pydantic request/response models for the API.

Wire format is camelCase. Request fields that carry numbers are typed
``Any`` so the service layer, not pydantic, decides what is a valid
minQty or price and reports it with its own error codes.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ProductResponse(CamelModel):
    """Response model for a product."""
    id: str
    name: str
    category: str


class VariantResponse(CamelModel):
    """Response model for a variant."""
    id: str
    product_id: str = Field(alias='productId')
    sku: str
    options: dict[str, Optional[str]]
    active: bool


class PriceTierResponse(CamelModel):
    """Response model for a price tier."""
    id: str
    variant_id: str = Field(alias='variantId')
    min_qty: int = Field(alias='minQty')
    price: float


class PriceTierCreate(CamelModel):
    """Request model for creating a price tier."""
    variant_id: Optional[str] = Field(default=None, alias='variantId')
    min_qty: Any = Field(default=None, alias='minQty')
    price: Any = None


class PriceTierUpdate(CamelModel):
    """Request model for updating a price tier. Only supplied fields change."""
    id: Optional[str] = None
    min_qty: Any = Field(default=None, alias='minQty')
    price: Any = None


class QuoteResponse(CamelModel):
    variant_id: str = Field(alias='variantId')
    quantity: int
    tier: Optional[PriceTierResponse]
    unit_price: Optional[float] = Field(alias='unitPrice')
    extended_price: Optional[float] = Field(alias='extendedPrice')


class DeleteResponse(BaseModel):
    success: bool
