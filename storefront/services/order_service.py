"""
Order Service - Business Logic Layer
"""
import json
import secrets
import string
from typing import Any, Dict, List, Optional, Tuple

from storefront.exceptions import CheckoutValidationError, StoreNotConfiguredError
from storefront.repositories.order_repository import OrderRepository
from storefront.schemas.order import CheckoutResponse, OrderResponse, OrderSummary
from storefront.services.product_service import ProductService
from storefront.utils.logger import get_logger
from storefront.utils.timestamps import now_ms, to_iso

logger = get_logger("orders")

DATABASE_NOT_CONFIGURED = "Database binding not configured"
MISSING_FIELDS = "Missing required fields: name, phone, address, items (array)"
EMPTY_CART = "Cart is empty"
INVALID_ITEM = "Each item must have id and valid quantity (≥1)"

ORDER_ID_ALPHABET = string.digits + string.ascii_lowercase
ORDER_ID_SUFFIX_LENGTH = 9


def generate_order_id(timestamp_ms: int) -> str:
    """Build ``ord_<millis>_<9 base36 chars>``"""
    suffix = "".join(secrets.choice(ORDER_ID_ALPHABET) for _ in range(ORDER_ID_SUFFIX_LENGTH))
    return f"ord_{timestamp_ms}_{suffix}"


def _is_valid_quantity(quantity: Any) -> bool:
    # bool is an int subclass but never a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        return False
    return quantity >= 1


def validate_checkout(payload: Any) -> Tuple[str, str, str, List[Any]]:
    """
    Validate a decoded checkout body
    
    Checks run in order and the first failure wins: required fields, a
    non-empty cart, then each item in turn.
    
    Returns:
        (name, phone, address, items)
    
    Raises:
        CheckoutValidationError: With the message to return to the client
    """
    if not isinstance(payload, dict):
        raise CheckoutValidationError(MISSING_FIELDS)
    
    name = payload.get("name")
    phone = payload.get("phone")
    address = payload.get("address")
    items = payload.get("items")
    
    for value in (name, phone, address):
        if not isinstance(value, str) or not value:
            raise CheckoutValidationError(MISSING_FIELDS)
    if not isinstance(items, list):
        raise CheckoutValidationError(MISSING_FIELDS)
    
    if not items:
        raise CheckoutValidationError(EMPTY_CART)
    
    for item in items:
        if not isinstance(item, dict) or not item.get("id") or not _is_valid_quantity(item.get("quantity")):
            raise CheckoutValidationError(INVALID_ITEM, invalid_item=item)
    
    return name, phone, address, items


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, repository: Optional[OrderRepository], product_service: ProductService):
        self.repository = repository
        self.product_service = product_service
    
    def _require_repository(self) -> OrderRepository:
        if self.repository is None:
            raise StoreNotConfiguredError(DATABASE_NOT_CONFIGURED)
        return self.repository
    
    async def checkout(self, payload: Any) -> CheckoutResponse:
        """
        Place an order
        
        Steps:
        1. Validate the payload
        2. Look up each item in the Product Store (warnings only)
        3. Generate order ID and creation time
        4. Save the order with items stored as a JSON string
        
        Args:
            payload: Decoded JSON request body
        
        Returns:
            Checkout confirmation
        
        Raises:
            CheckoutValidationError: If the payload is rejected
            StoreNotConfiguredError: If no Order Store is bound
        """
        name, phone, address, items = validate_checkout(payload)
        
        for item in items:
            await self.product_service.check_product_exists(item["id"])
        
        timestamp_ms = now_ms()
        order_id = generate_order_id(timestamp_ms)
        created_at = timestamp_ms // 1000
        
        repository = self._require_repository()
        repository.create({
            "id": order_id,
            "name": name,
            "phone": phone,
            "address": address,
            "items": json.dumps(items),
            "created_at": created_at,
        })
        logger.info(f"Order saved with ID: {order_id}")
        
        return CheckoutResponse(
            order_id=order_id,
            timestamp=created_at,
            created_at=to_iso(created_at),
            summary=OrderSummary(
                customer=name,
                item_count=len(items),
                total_items=sum(item["quantity"] for item in items),
            ),
        )
    
    def get_all_orders(self) -> List[OrderResponse]:
        """
        Get all orders, newest first, each with its decoded items
        
        A row whose items cannot be fetched or decoded is returned with empty
        items and a ``parse_error`` instead of failing the listing. A row that
        vanished after the listing query keeps empty items.
        """
        repository = self._require_repository()
        
        rows = repository.get_all()
        logger.info(f"Found {len(rows)} orders")
        
        return [self._with_items(repository, row) for row in rows]
    
    def get_order_by_id(self, order_id: str) -> Optional[OrderResponse]:
        """Get an order by ID with decoded items"""
        repository = self._require_repository()
        
        order = repository.get_by_id(order_id)
        if not order:
            return None
        
        return OrderResponse(
            id=order.id,
            name=order.name,
            phone=order.phone,
            address=order.address,
            items=json.loads(order.items),
            created_at=to_iso(order.created_at),
        )
    
    def _with_items(self, repository: OrderRepository, row: Dict[str, Any]) -> OrderResponse:
        # Fetch or decode failures only affect this row
        fields = dict(row, created_at=to_iso(row["created_at"]))
        try:
            full_order = repository.get_by_id(row["id"])
            if full_order is None:
                return OrderResponse(**fields)
            return OrderResponse(**fields, items=json.loads(full_order.items))
        except Exception as e:
            logger.error(f"Error loading items for order {row['id']}: {e}")
            return OrderResponse(**fields, items=[], parse_error=str(e))
