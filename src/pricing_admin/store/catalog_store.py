"""
Catalog Store - in-memory holder for products, variants and price tiers.

The store is the only mutation surface. Collections are insertion-ordered
dicts keyed by id. Writers serialize through ``write_lock()``; the service
layer holds the lock across its validate-then-mutate sequence.
"""
import itertools
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from .models import Product, Variant, PriceTier, SeedData


class CatalogStore:
    """Process-wide catalog collections with serialized writes."""

    TIER_ID_PREFIX = 't'

    def __init__(self, seed: Optional[SeedData] = None):
        self._lock = threading.RLock()
        self._products: dict[str, Product] = {}
        self._variants: dict[str, Variant] = {}
        self._price_tiers: dict[str, PriceTier] = {}
        self._issued_tier_ids: set[str] = set()
        self._tier_counter = itertools.count(1)
        if seed is not None:
            self.initialize(seed)

    def initialize(self, seed: SeedData):
        """Replace the store contents with the given seed data."""
        with self._lock:
            self._products = {p.id: p for p in seed.products}
            self._variants = {v.id: v for v in seed.variants}
            self._price_tiers = {
                t.id: PriceTier(t.id, t.variant_id, t.min_qty, t.price)
                for t in seed.price_tiers
            }
            self._issued_tier_ids = set(self._price_tiers)
            self._tier_counter = itertools.count(1)

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the store's single writer lock."""
        with self._lock:
            yield

    # Reads

    @property
    def products(self) -> list[Product]:
        return list(self._products.values())

    @property
    def variants(self) -> list[Variant]:
        return list(self._variants.values())

    @property
    def price_tiers(self) -> list[PriceTier]:
        return list(self._price_tiers.values())

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def get_variant(self, variant_id: str) -> Optional[Variant]:
        return self._variants.get(variant_id)

    def get_price_tier(self, tier_id: str) -> Optional[PriceTier]:
        return self._price_tiers.get(tier_id)

    # Mutation primitives (used by the data-access layer only)

    def next_price_tier_id(self) -> str:
        """Allocate a tier id that has never been used in this store."""
        with self._lock:
            while True:
                candidate = f"{self.TIER_ID_PREFIX}{next(self._tier_counter)}"
                if candidate not in self._issued_tier_ids:
                    self._issued_tier_ids.add(candidate)
                    return candidate

    def insert_price_tier(self, tier: PriceTier) -> PriceTier:
        with self._lock:
            if tier.id in self._price_tiers:
                raise KeyError(f"Price tier '{tier.id}' already exists")
            self._issued_tier_ids.add(tier.id)
            self._price_tiers[tier.id] = tier
            return tier

    def replace_price_tier(self, tier: PriceTier) -> Optional[PriceTier]:
        with self._lock:
            if tier.id not in self._price_tiers:
                return None
            self._price_tiers[tier.id] = tier
            return tier

    def remove_price_tier(self, tier_id: str) -> bool:
        with self._lock:
            return self._price_tiers.pop(tier_id, None) is not None
