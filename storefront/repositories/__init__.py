"""
Repositories package
"""
from storefront.repositories.order_repository import OrderRepository, is_missing_table_error
from storefront.repositories.product_store import (
    ProductStore,
    HttpProductStore,
    InMemoryProductStore,
    ProductStoreError,
)

__all__ = [
    "OrderRepository",
    "is_missing_table_error",
    "ProductStore",
    "HttpProductStore",
    "InMemoryProductStore",
    "ProductStoreError",
]
