"""Services subpackage - data access, validation and display helpers."""
from .catalog_service import CatalogService
from .price_tier_service import PriceTierService, Quote
from .errors import CatalogError, ValidationError, NotFoundError

__all__ = ['CatalogService', 'PriceTierService', 'Quote', 'CatalogError', 'ValidationError', 'NotFoundError']
