"""Store subpackage - catalog models, seed loading and the in-memory store."""
from .catalog_store import CatalogStore
from .models import Product, Variant, PriceTier, SeedData
from .seed import load_seed, SeedError

__all__ = ['CatalogStore', 'Product', 'Variant', 'PriceTier', 'SeedData', 'load_seed', 'SeedError']
