"""
Product Service - Business Logic Layer
"""
import asyncio
from typing import Any, List, Optional

from storefront.exceptions import StoreNotConfiguredError
from storefront.repositories.product_store import ProductStore
from storefront.utils.logger import get_logger

logger = get_logger("products")

PRODUCTS_NOT_CONFIGURED = "Products KV binding not configured"


class ProductService:
    """Service layer for reading products from the Product Store"""
    
    def __init__(self, store: Optional[ProductStore]):
        self.store = store
    
    def _require_store(self) -> ProductStore:
        if self.store is None:
            raise StoreNotConfiguredError(PRODUCTS_NOT_CONFIGURED)
        return self.store
    
    async def get_all_products(self) -> List[Any]:
        """
        Get every product document
        
        Keys are listed first, then all documents are fetched concurrently.
        The result follows key order; keys whose document vanished are dropped.
        
        Raises:
            StoreNotConfiguredError: If no Product Store is bound
        """
        store = self._require_store()
        
        keys = await store.list_keys()
        logger.info(f"Found {len(keys)} product keys")
        if not keys:
            return []
        
        products = await asyncio.gather(*(store.get(key) for key in keys))
        valid_products = [p for p in products if p is not None]
        
        logger.info(f"Returning {len(valid_products)} products")
        return valid_products
    
    async def get_product_by_id(self, product_id: str) -> Optional[Any]:
        """
        Get a product document by ID
        
        Raises:
            StoreNotConfiguredError: If no Product Store is bound
        """
        store = self._require_store()
        return await store.get(product_id)
    
    async def check_product_exists(self, product_id: Any) -> None:
        """
        Best-effort existence check used during checkout
        
        Never raises: a missing store is skipped, a missing product or a
        failing lookup is only logged.
        """
        if self.store is None:
            return
        
        try:
            product = await self.store.get(str(product_id))
        except Exception as e:
            logger.warning(f"KV check skipped: {e}")
            return
        
        if product is None:
            logger.warning(f"Product {product_id} not found in KV during checkout")
