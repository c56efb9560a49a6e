"""
Models package
"""
from storefront.models.order import Order

__all__ = ["Order"]
