"""
Product API endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import Optional

from storefront.api.dependencies import get_product_store
from storefront.api.responses import error_response
from storefront.exceptions import StoreNotConfiguredError
from storefront.repositories.product_store import ProductStore
from storefront.services.product_service import ProductService
from storefront.utils.logger import get_logger

logger = get_logger("api.products")

router = APIRouter(tags=["products"])


def get_product_service(store: Optional[ProductStore] = Depends(get_product_store)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(store)


@router.get("/products", summary="List all products")
async def get_products(service: ProductService = Depends(get_product_service)):
    """
    Retrieve every product document in the Product Store
    
    Documents come back in key order; an empty store yields ``[]``.
    """
    logger.info("Fetching all products from KV...")
    try:
        return await service.get_all_products()
    except StoreNotConfiguredError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception("Products error")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get("/product/{product_path:path}", summary="Get product by ID")
async def get_product(product_path: str, service: ProductService = Depends(get_product_service)):
    """
    Retrieve a single product
    
    - **product_path**: the last path segment is the product ID
    """
    product_id = product_path.split("/")[-1]
    logger.info(f"Fetching product {product_id} from KV...")
    
    try:
        product = await service.get_product_by_id(product_id)
    except StoreNotConfiguredError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception(f"Error fetching product {product_id}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    
    if product is None:
        logger.info(f"Product {product_id} not found")
        return error_response(status.HTTP_404_NOT_FOUND, "Product not found")
    return product
