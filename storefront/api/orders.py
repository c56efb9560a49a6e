"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, Request, status
from typing import List, Optional

from storefront.api.dependencies import get_order_repository
from storefront.api.products import get_product_service
from storefront.api.responses import error_response
from storefront.exceptions import CheckoutValidationError, StoreNotConfiguredError
from storefront.repositories.order_repository import OrderRepository, is_missing_table_error
from storefront.schemas.order import CheckoutResponse, OrderResponse
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService
from storefront.utils.logger import get_logger

logger = get_logger("api.orders")

router = APIRouter(tags=["orders"])


def get_order_service(
    repository: Optional[OrderRepository] = Depends(get_order_repository),
    product_service: ProductService = Depends(get_product_service)
) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(repository, product_service)


@router.post(
    "/checkout",
    response_model=CheckoutResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order"
)
async def checkout(request: Request, service: OrderService = Depends(get_order_service)):
    """
    Place an order
    
    Body: ``{"name", "phone", "address", "items": [{"id", "quantity"}]}``.
    Every field is required, the cart must not be empty and each quantity
    must be at least 1.
    """
    logger.info("Processing checkout request...")
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    
    try:
        return await service.checkout(payload)
    except CheckoutValidationError as e:
        if e.has_invalid_item:
            return error_response(status.HTTP_400_BAD_REQUEST, e.message, invalidItem=e.invalid_item)
        return error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except StoreNotConfiguredError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception("Checkout error")
        if is_missing_table_error(e):
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Orders table not found. Please run the schema.sql file first.",
                details=str(e)
            )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get(
    "/orders",
    response_model=List[OrderResponse],
    response_model_exclude_none=True,
    summary="List all orders"
)
def get_orders(service: OrderService = Depends(get_order_service)):
    """
    Retrieve all orders, newest first
    
    Orders whose stored items cannot be decoded carry ``parseError``.
    """
    logger.info("Fetching orders from database...")
    try:
        return service.get_all_orders()
    except StoreNotConfiguredError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception("Orders error")
        if is_missing_table_error(e):
            return error_response(
                status.HTTP_404_NOT_FOUND,
                "Orders table not found. No orders have been placed yet.",
                details=str(e)
            )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get(
    "/order/{order_path:path}",
    response_model=OrderResponse,
    response_model_exclude_none=True,
    summary="Get order by ID"
)
def get_order(order_path: str, service: OrderService = Depends(get_order_service)):
    """
    Retrieve a specific order
    
    - **order_path**: the last path segment is the order ID
    """
    order_id = order_path.split("/")[-1]
    logger.info(f"Fetching order {order_id} from database...")
    
    try:
        order = service.get_order_by_id(order_id)
    except StoreNotConfiguredError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception(f"Error fetching order {order_id}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    
    if order is None:
        return error_response(status.HTTP_404_NOT_FOUND, "Order not found")
    return order
