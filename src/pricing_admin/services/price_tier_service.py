"""
Price Tier Service - validation and request handling for price tiers.

Enforces the input contract before touching the data-access layer:

1. minQty is required on create and must be an integer >= 1
2. price is required on create and must be a number > 0
3. minQty is unique among one variant's tiers (the edited tier excluded)
4. updates only touch the fields supplied; the id must resolve

Duplicate checks and the mutation that follows run under the store's write
lock so concurrent writers cannot both pass the check.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from ..store import PriceTier
from .catalog_service import CatalogService
from .errors import (
    MissingFieldError,
    InvalidMinQtyError,
    InvalidPriceError,
    InvalidQuantityError,
    DuplicateMinQtyError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_positive_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int if it is an integer >= 1, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int) or value < 1:
        return None
    return value


def validate_min_qty(value: Any) -> int:
    min_qty = _as_positive_int(value)
    if min_qty is None:
        raise InvalidMinQtyError()
    return min_qty


def validate_price(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidPriceError()
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidPriceError() from None
    if not math.isfinite(as_float) or as_float <= 0:
        raise InvalidPriceError()
    return as_float


@dataclass
class Quote:
    """Unit price resolved for a variant at a given order quantity."""
    variant_id: str
    quantity: int
    tier: Optional[PriceTier]

    @property
    def unit_price(self) -> Optional[float]:
        return self.tier.price if self.tier else None

    @property
    def extended_price(self) -> Optional[float]:
        if self.tier is None:
            return None
        return round(self.tier.price * self.quantity, 2)

    def to_dict(self) -> dict:
        return {
            'variantId': self.variant_id,
            'quantity': self.quantity,
            'tier': self.tier.to_dict() if self.tier else None,
            'unitPrice': self.unit_price,
            'extendedPrice': self.extended_price,
        }


class PriceTierService:
    """Validated create/update/delete/list for price tiers."""

    def __init__(self, catalog: CatalogService):
        self.catalog = catalog

    def list_for_variant(self, variant_id: Optional[str]) -> list[PriceTier]:
        if is_missing(variant_id):
            raise MissingFieldError("Variant ID")
        return self.catalog.list_price_tiers_by_variant(variant_id)

    def create(self, variant_id: Optional[str], min_qty: Any, price: Any) -> PriceTier:
        """Validate and create a tier."""
        missing = [
            name for name, value in (('variantId', variant_id), ('minQty', min_qty), ('price', price))
            if is_missing(value)
        ]
        if missing:
            raise MissingFieldError(*missing)

        min_qty = validate_min_qty(min_qty)
        price = validate_price(price)

        with self.catalog.store.write_lock():
            self._check_duplicate(variant_id, min_qty)
            tier = self.catalog.create_price_tier(variant_id, min_qty, price)

        logger.info("Created price tier %s for variant %s (minQty=%d, price=%s)",
                    tier.id, variant_id, min_qty, price)
        return tier

    def update(self, tier_id: Optional[str], updates: dict) -> PriceTier:
        """Validate and apply a partial update.

        ``updates`` holds only the fields the caller supplied, keyed
        ``min_qty`` and/or ``price``.
        """
        if is_missing(tier_id):
            raise MissingFieldError("ID")

        changes = {}
        if 'min_qty' in updates:
            changes['min_qty'] = validate_min_qty(updates['min_qty'])
        if 'price' in updates:
            changes['price'] = validate_price(updates['price'])

        with self.catalog.store.write_lock():
            current = self.catalog.find_price_tier_by_id(tier_id)
            if current is None:
                raise NotFoundError("Price tier", tier_id)
            if 'min_qty' in changes:
                self._check_duplicate(current.variant_id, changes['min_qty'], exclude_id=tier_id)
            updated = self.catalog.update_price_tier(tier_id, changes)

        logger.info("Updated price tier %s: %s", tier_id, changes)
        return updated

    def delete(self, tier_id: Optional[str]) -> None:
        if is_missing(tier_id):
            raise MissingFieldError("ID")
        if not self.catalog.delete_price_tier(tier_id):
            raise NotFoundError("Price tier", tier_id)
        logger.info("Deleted price tier %s", tier_id)

    def quote(self, variant_id: Optional[str], quantity: Any) -> Quote:
        """Resolve the unit price that applies to ``quantity`` units of a variant."""
        if is_missing(variant_id):
            raise MissingFieldError("Variant ID")
        if is_missing(quantity):
            raise MissingFieldError("qty")
        if self.catalog.find_variant_by_id(variant_id) is None:
            raise NotFoundError("Variant", variant_id)

        if isinstance(quantity, str):
            try:
                quantity = int(quantity.strip())
            except ValueError:
                raise InvalidQuantityError() from None
        qty = _as_positive_int(quantity)
        if qty is None:
            raise InvalidQuantityError()

        return Quote(
            variant_id=variant_id,
            quantity=qty,
            tier=self.catalog.resolve_unit_price(variant_id, qty),
        )

    def _check_duplicate(self, variant_id: str, min_qty: int, exclude_id: Optional[str] = None):
        for tier in self.catalog.list_price_tiers_by_variant(variant_id):
            if tier.id != exclude_id and tier.min_qty == min_qty:
                raise DuplicateMinQtyError(min_qty)
