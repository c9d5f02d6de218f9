"""
Seed loader - reads the initial catalog document from disk.
"""
import json
import logging
from pathlib import Path

from .models import Product, Variant, PriceTier, SeedData

logger = logging.getLogger(__name__)


class SeedError(ValueError):
    """Raised when the seed document cannot be turned into catalog data."""


def load_seed(path: Path) -> SeedData:
    """Load products, variants and price tiers from a JSON seed document."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Seed document not found at {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise SeedError(f"Seed document {path} is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise SeedError(f"Seed document {path} must be a JSON object")

    return parse_seed(document)


def parse_seed(document: dict) -> SeedData:
    """Build SeedData from an already-decoded seed document."""
    try:
        seed = SeedData(
            products=[Product.from_dict(row) for row in document.get('products', [])],
            variants=[Variant.from_dict(row) for row in document.get('variants', [])],
            price_tiers=[PriceTier.from_dict(row) for row in document.get('priceTiers', [])],
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SeedError(f"Malformed seed row: {e!r}") from e

    logger.debug(
        "Parsed seed: %d products, %d variants, %d price tiers",
        len(seed.products), len(seed.variants), len(seed.price_tiers),
    )
    return seed
