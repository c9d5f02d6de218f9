"""
Shared API state - the store and services owned by the running app.

The store is seeded once at import. Handlers reach the services through the
dependency functions below so tests can swap in their own instances.
"""
import logging

from ..config.settings import get_settings
from ..services import CatalogService, PriceTierService
from ..store import CatalogStore, load_seed

logger = logging.getLogger(__name__)


def build_services(store: CatalogStore) -> tuple[CatalogService, PriceTierService]:
    catalog = CatalogService(store)
    return catalog, PriceTierService(catalog)


settings = get_settings()
store = CatalogStore(load_seed(settings.seed_path))
catalog_service, price_tier_service = build_services(store)
logger.info(
    "Catalog store seeded from %s (%d products, %d variants, %d price tiers)",
    settings.seed_path, len(store.products), len(store.variants), len(store.price_tiers),
)


def get_catalog_service() -> CatalogService:
    return catalog_service


def get_price_tier_service() -> PriceTierService:
    return price_tier_service
