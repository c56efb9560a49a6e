"""
Schemas package
"""
from storefront.schemas.order import (
    OrderSummary,
    CheckoutResponse,
    OrderResponse,
)
from storefront.schemas.health import HealthResponse, ServicesStatus, ApiDescriptor

__all__ = [
    "OrderSummary",
    "CheckoutResponse",
    "OrderResponse",
    "HealthResponse",
    "ServicesStatus",
    "ApiDescriptor",
]
