"""
Catalog API - FastAPI routers for browsing products and variants.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from ..services import CatalogService
from ..services.errors import MissingFieldError, NotFoundError
from ..services.price_tier_service import is_missing
from .schemas import ProductResponse, VariantResponse
from .state import get_catalog_service

products_router = APIRouter(prefix="/api/products", tags=["products"])
variants_router = APIRouter(prefix="/api/variants", tags=["variants"])


@products_router.get("", response_model=list[ProductResponse])
async def list_products(
    name: Optional[str] = None,
    category: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """List products, optionally filtered by name and category substrings."""
    products = catalog.list_products(name=name, category=category)
    return [ProductResponse(**p.__dict__) for p in products]


@products_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    product = catalog.find_product_by_id(product_id)
    if product is None:
        raise NotFoundError("Product", product_id)
    return ProductResponse(**product.__dict__)


@variants_router.get("", response_model=list[VariantResponse])
async def list_variants(
    productId: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """List a product's variants. An unknown product yields an empty list."""
    if is_missing(productId):
        raise MissingFieldError("Product ID")
    return [VariantResponse(**v.to_dict()) for v in catalog.list_variants_by_product(productId)]


@variants_router.get("/{variant_id}", response_model=VariantResponse)
async def get_variant(variant_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    variant = catalog.find_variant_by_id(variant_id)
    if variant is None:
        raise NotFoundError("Variant", variant_id)
    return VariantResponse(**variant.to_dict())
