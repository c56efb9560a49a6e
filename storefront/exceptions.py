"""
Exceptions raised by the service layer and mapped to HTTP responses by the API
"""
from typing import Any


class StorefrontError(Exception):
    """Base exception for Storefront errors"""
    pass


class StoreNotConfiguredError(StorefrontError):
    """A required store binding was not wired into the application"""
    pass


_NO_ITEM = object()


class CheckoutValidationError(StorefrontError):
    """Checkout payload rejected; carries the offending item when there is one"""
    
    def __init__(self, message: str, invalid_item: Any = _NO_ITEM):
        super().__init__(message)
        self.message = message
        self.invalid_item = invalid_item
    
    @property
    def has_invalid_item(self) -> bool:
        return self.invalid_item is not _NO_ITEM
