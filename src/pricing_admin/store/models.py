"""
Data models for the catalog store.

Uses dataclasses for structured, type-safe data representation. The seed
document and the HTTP API both use camelCase keys, so every model converts
to and from that wire shape.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Product:
    """A catalog product. Seeded once, never mutated."""
    id: str
    name: str
    category: str

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'category': self.category}

    @classmethod
    def from_dict(cls, row: dict) -> 'Product':
        return cls(
            id=str(row['id']),
            name=str(row['name']),
            category=str(row['category']),
        )


@dataclass(frozen=True)
class Variant:
    """A purchasable configuration of a product (one SKU plus its options)."""
    id: str
    product_id: str
    sku: str
    options: Mapping[str, Optional[str]] = field(default_factory=dict, hash=False)
    active: bool = True

    def __post_init__(self):
        # Read-only view so seeded options cannot be edited in place
        object.__setattr__(self, 'options', MappingProxyType(dict(self.options)))

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'productId': self.product_id,
            'sku': self.sku,
            'options': dict(self.options),
            'active': self.active,
        }

    @classmethod
    def from_dict(cls, row: dict) -> 'Variant':
        options = row.get('options') or {}
        return cls(
            id=str(row['id']),
            product_id=str(row['productId']),
            sku=str(row['sku']),
            options={str(k): (None if v is None else str(v)) for k, v in options.items()},
            active=bool(row.get('active', True)),
        )


@dataclass(frozen=True)
class PriceTier:
    """A quantity breakpoint and the unit price that applies from it upward.

    Frozen: changes go through ``CatalogService.update_price_tier``, which
    swaps in a replaced copy under the store's write lock.
    """
    id: str
    variant_id: str
    min_qty: int
    price: float

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'variantId': self.variant_id,
            'minQty': self.min_qty,
            'price': self.price,
        }

    @classmethod
    def from_dict(cls, row: dict) -> 'PriceTier':
        return cls(
            id=str(row['id']),
            variant_id=str(row['variantId']),
            min_qty=int(row['minQty']),
            price=float(row['price']),
        )


@dataclass
class SeedData:
    """The three collections loaded into the store at startup."""
    products: list[Product] = field(default_factory=list)
    variants: list[Variant] = field(default_factory=list)
    price_tiers: list[PriceTier] = field(default_factory=list)
