"""
Main entrypoint for the Pricing Admin API.

``create_app`` configures logging, CORS, error handling and the routers;
``app`` is built at import so uvicorn can serve ``pricing_admin.api.main:app``.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import get_settings, setup_logging
from ..services.errors import CatalogError, MissingFieldError, ValidationError

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError):
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_detail())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies with the domain error shape."""
    errors = exc.errors()
    missing = []
    for error in errors:
        if error.get('type') != 'missing':
            continue
        loc = [str(part) for part in error.get('loc', ()) if part != 'body']
        missing.append(loc[-1] if loc else 'request body')

    if missing and len(missing) == len(errors):
        domain_error = MissingFieldError(*missing)
    else:
        first = errors[0] if errors else {}
        field = '.'.join(str(part) for part in first.get('loc', ()) if part != 'body') or 'request body'
        domain_error = ValidationError(f"{field}: {first.get('msg', 'invalid value')}")
    return await catalog_error_handler(request, domain_error)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "code": "internal_error"},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    # Import after logging is configured so store seeding is logged
    from .catalog_api import products_router, variants_router
    from .price_tiers_api import router as price_tiers_router
    from .state import store

    app = FastAPI(
        title=settings.api_title,
        description="Catalog browsing and quantity price tier management",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    app.include_router(products_router)
    app.include_router(variants_router)
    app.include_router(price_tiers_router)

    @app.get("/")
    async def root():
        return {
            "status": "online",
            "message": "Pricing Admin API Active",
            "products": len(store.products),
            "variants": len(store.variants),
            "price_tiers": len(store.price_tiers),
        }

    return app


app = create_app()
