"""
Health check and default descriptor endpoints
"""
from fastapi import APIRouter, Depends
from typing import Optional

from storefront.api.dependencies import get_order_repository, get_product_store
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_store import ProductStore
from storefront.schemas.health import ApiDescriptor, HealthResponse, ServicesStatus
from storefront.utils.timestamps import to_iso

router = APIRouter(tags=["health"])

# Registered after every other route so it only answers what nothing else matched
fallback_router = APIRouter(tags=["health"])

API_DESCRIPTOR = ApiDescriptor(
    message="E-commerce API",
    endpoints=[
        "GET  /products - List all products",
        "GET  /product/:id - Get single product",
        "POST /checkout - Place an order",
        "GET  /orders - List all orders (admin)",
        "GET  /order/:id - Get specific order",
        "GET  /health - Health check",
    ],
    note="Products are stored in KV, orders are stored in D1",
)


@router.get("/health", response_model=HealthResponse)
def health_check(
    product_store: Optional[ProductStore] = Depends(get_product_store),
    order_repository: Optional[OrderRepository] = Depends(get_order_repository)
):
    """
    Health check endpoint
    
    Reports which store bindings are configured; never fails.
    """
    return HealthResponse(
        timestamp=to_iso(),
        services=ServicesStatus(
            kv=product_store is not None,
            d1=order_repository is not None,
        ),
    )


@fallback_router.api_route(
    "/{full_path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    response_model=ApiDescriptor,
    include_in_schema=False
)
def root(full_path: str):
    """Describe the available endpoints"""
    return API_DESCRIPTOR
