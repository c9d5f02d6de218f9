import pytest

from pricing_admin.services import CatalogService, PriceTierService
from pricing_admin.store import CatalogStore
from pricing_admin.store.seed import parse_seed


SEED_DOCUMENT = {
    "products": [
        {"id": "p1", "name": "Hot Cup", "category": "Cups"},
        {"id": "p2", "name": "Kraft Paper Bag", "category": "Bags"},
        {"id": "p3", "name": "Cold Cup", "category": "Cups"},
        {"id": "p4", "name": "Stir Stick", "category": "Accessories"},
    ],
    "variants": [
        {"id": "v1", "productId": "p1", "sku": "HC-8OZ", "options": {"size": "8oz", "printColors": "1"}, "active": True},
        {"id": "v2", "productId": "p1", "sku": "HC-12OZ", "options": {"size": "12oz", "lid": None}, "active": True},
        {"id": "v3", "productId": "p2", "sku": "KB-SM", "options": {"color": "kraft"}, "active": False},
        {"id": "v4", "productId": "p3", "sku": "CC-16OZ", "options": {}, "active": True},
    ],
    "priceTiers": [
        {"id": "t1", "variantId": "v1", "minQty": 500, "price": 0.28},
        {"id": "t2", "variantId": "v1", "minQty": 1, "price": 0.35},
        {"id": "t3", "variantId": "v2", "minQty": 100, "price": 0.40},
        {"id": "t4", "variantId": "v1", "minQty": 5000, "price": 0.19},
    ],
}


@pytest.fixture
def store():
    return CatalogStore(parse_seed(SEED_DOCUMENT))


@pytest.fixture
def catalog(store):
    return CatalogService(store)


@pytest.fixture
def tiers(catalog):
    return PriceTierService(catalog)
