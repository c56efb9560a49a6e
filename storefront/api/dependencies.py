"""
Store bindings injected into create_app and handed to request handlers
"""
from typing import Optional
from fastapi import Request

from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_store import ProductStore


def get_product_store(request: Request) -> Optional[ProductStore]:
    """Product Store bound to the application, None when not configured"""
    return request.app.state.product_store


def get_order_repository(request: Request) -> Optional[OrderRepository]:
    """Order Store bound to the application, None when not configured"""
    return request.app.state.order_store
