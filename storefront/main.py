"""
FastAPI Application Entry Point - Storefront API
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from prometheus_fastapi_instrumentator import Instrumentator
from typing import Optional

from storefront import __version__
from storefront.config import Settings, settings
from storefront.database import create_db_engine, create_session_factory
from storefront.api import health, orders, products
from storefront.api.responses import ALLOW_ORIGIN, PREFLIGHT_HEADERS, error_response
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_store import HttpProductStore, InMemoryProductStore, ProductStore
from storefront.utils.logger import get_logger

logger = get_logger()


def build_product_store(config: Settings) -> Optional[ProductStore]:
    """Product Store from settings, None when neither a KV URL nor a file is set"""
    if config.PRODUCTS_KV_URL:
        return HttpProductStore(
            config.PRODUCTS_KV_URL,
            token=config.PRODUCTS_KV_TOKEN,
            timeout=config.PRODUCTS_KV_TIMEOUT
        )
    if config.PRODUCTS_FILE:
        return InMemoryProductStore.from_file(config.PRODUCTS_FILE)
    return None


def build_order_repository(config: Settings) -> Optional[OrderRepository]:
    """Order Store from settings, None when DATABASE_URL is not set"""
    if not config.DATABASE_URL:
        return None
    engine = create_db_engine(config.DATABASE_URL)
    return OrderRepository(create_session_factory(engine))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report which stores are bound on startup"""
    logger.info(f"Starting {settings.SERVICE_NAME}...")
    product_store = app.state.product_store
    logger.info(f"✓ Product Store: {type(product_store).__name__ if product_store else 'not configured'}")
    logger.info(f"✓ Order Store: {'configured' if app.state.order_store else 'not configured'}")
    yield
    logger.info(f"Shutting down {settings.SERVICE_NAME}...")


def create_app(
    product_store: Optional[ProductStore] = None,
    order_store: Optional[OrderRepository] = None,
    metrics_enabled: bool = False
) -> FastAPI:
    """
    Build the application around the given store bindings
    
    A binding left as None is reported as not configured by the endpoints
    that need it.
    """
    app = FastAPI(
        title="Storefront API",
        description="Products from a KV namespace, orders in a SQL table",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.product_store = product_store
    app.state.order_store = order_store
    
    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        """Answer preflight directly and allow any origin on everything else"""
        logger.info(f"Received {request.method} request to {request.url}")
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=PREFLIGHT_HEADERS, media_type="application/json")
        
        response = await call_next(request)
        response.headers.update(ALLOW_ORIGIN)
        return response
    
    @app.exception_handler(StarletteHTTPException)
    async def unmatched_route(request: Request, exc: StarletteHTTPException):
        """Methods the fallback route does not list still get the descriptor"""
        if exc.status_code in (404, 405):
            return JSONResponse(content=health.API_DESCRIPTOR.model_dump(), headers=ALLOW_ORIGIN)
        return await http_exception_handler(request, exc)
    
    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, str(exc))
    
    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    
    # Prometheus metrics
    if metrics_enabled:
        Instrumentator().instrument(app).expose(app)
    
    # Catch-all descriptor goes last
    app.include_router(health.fallback_router)
    
    return app


app = create_app(
    build_product_store(settings),
    build_order_repository(settings),
    metrics_enabled=settings.METRICS_ENABLED
)
