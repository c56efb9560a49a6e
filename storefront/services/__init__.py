"""
Services package
"""
from storefront.services.product_service import ProductService
from storefront.services.order_service import OrderService

__all__ = ["ProductService", "OrderService"]
