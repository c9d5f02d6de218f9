"""
Catalog Service - data-access operations over the catalog store.

Reads filter and sort the store's collections; writes go through the store's
mutation primitives. Nothing here validates input: that is the job of
``PriceTierService``.
"""
import logging
from dataclasses import replace
from typing import Optional

from ..store import CatalogStore, Product, Variant, PriceTier

logger = logging.getLogger(__name__)


class CatalogService:
    """Read and write access to products, variants and price tiers."""

    UPDATABLE_FIELDS = ('min_qty', 'price')

    def __init__(self, store: CatalogStore):
        self.store = store

    # Products

    def list_products(self, name: Optional[str] = None, category: Optional[str] = None) -> list[Product]:
        """List products, optionally filtered by case-insensitive name/category substrings."""
        products = self.store.products
        if name:
            needle = name.lower()
            products = [p for p in products if needle in p.name.lower()]
        if category:
            needle = category.lower()
            products = [p for p in products if needle in p.category.lower()]
        return products

    def find_product_by_id(self, product_id: str) -> Optional[Product]:
        return self.store.get_product(product_id)

    def list_categories(self) -> list[str]:
        """Distinct product categories in first-seen order."""
        return list(dict.fromkeys(p.category for p in self.store.products))

    # Variants

    def list_variants_by_product(self, product_id: str) -> list[Variant]:
        return [v for v in self.store.variants if v.product_id == product_id]

    def find_variant_by_id(self, variant_id: str) -> Optional[Variant]:
        return self.store.get_variant(variant_id)

    # Price tiers

    def list_price_tiers_by_variant(self, variant_id: str) -> list[PriceTier]:
        """All tiers for a variant, ascending by minimum quantity."""
        tiers = [t for t in self.store.price_tiers if t.variant_id == variant_id]
        return sorted(tiers, key=lambda t: t.min_qty)

    def find_price_tier_by_id(self, tier_id: str) -> Optional[PriceTier]:
        return self.store.get_price_tier(tier_id)

    def create_price_tier(self, variant_id: str, min_qty: int, price: float) -> PriceTier:
        """Append a new tier with a freshly allocated id. Does not check uniqueness."""
        with self.store.write_lock():
            tier = PriceTier(
                id=self.store.next_price_tier_id(),
                variant_id=variant_id,
                min_qty=min_qty,
                price=price,
            )
            return self.store.insert_price_tier(tier)

    def update_price_tier(self, tier_id: str, updates: dict) -> Optional[PriceTier]:
        """Merge ``min_qty``/``price`` into an existing tier. Returns None if not found."""
        with self.store.write_lock():
            current = self.store.get_price_tier(tier_id)
            if current is None:
                return None
            changes = {k: v for k, v in updates.items() if k in self.UPDATABLE_FIELDS}
            return self.store.replace_price_tier(replace(current, **changes))

    def delete_price_tier(self, tier_id: str) -> bool:
        return self.store.remove_price_tier(tier_id)

    def resolve_unit_price(self, variant_id: str, quantity: int) -> Optional[PriceTier]:
        """Find the tier with the largest breakpoint not above ``quantity``."""
        applicable = None
        for tier in self.list_price_tiers_by_variant(variant_id):
            if tier.min_qty > quantity:
                break
            applicable = tier
        return applicable
