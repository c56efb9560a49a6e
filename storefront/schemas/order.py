"""
Pydantic schemas for order responses

Checkout input is validated field by field in the order service rather than
by a schema, so clients get the exact error messages the API documents.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional, Union


class OrderSummary(BaseModel):
    """Short summary returned after checkout"""
    customer: str
    item_count: int = Field(..., alias="itemCount")
    total_items: Union[int, float] = Field(..., alias="totalItems")
    
    model_config = ConfigDict(populate_by_name=True)


class CheckoutResponse(BaseModel):
    """Schema for a successful checkout"""
    success: bool = True
    order_id: str = Field(..., alias="orderId")
    message: str = "Order placed successfully"
    timestamp: int = Field(..., description="Unix seconds the order was created at")
    created_at: str = Field(..., description="ISO-8601 form of timestamp")
    summary: OrderSummary
    
    model_config = ConfigDict(populate_by_name=True)


class OrderResponse(BaseModel):
    """Schema for order response, items decoded from their stored JSON"""
    id: str
    name: str
    phone: str
    address: str
    items: Any = Field(default_factory=list)
    created_at: str
    parse_error: Optional[str] = Field(None, alias="parseError")
    
    model_config = ConfigDict(populate_by_name=True)
