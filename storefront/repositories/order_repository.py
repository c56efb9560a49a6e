"""
Order Repository - Data Access Layer
"""
from typing import Dict, List, Optional
from sqlalchemy import desc
from sqlalchemy.orm import sessionmaker

from storefront.models.order import Order

# Wording used by SQLite, PostgreSQL and MySQL when the orders table is absent
MISSING_TABLE_MARKERS = (
    "no such table",
    'relation "orders" does not exist',
    "orders' doesn't exist",
)


def is_missing_table_error(error: Exception) -> bool:
    """Check whether ``error`` reports that the orders table does not exist"""
    message = str(error)
    return any(marker in message for marker in MISSING_TABLE_MARKERS)


class OrderRepository:
    """Repository for the orders table, opening one session per operation"""
    
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
    
    def create(self, order_data: dict) -> Order:
        """
        Insert a new order
        
        Args:
            order_data: Dictionary with id, name, phone, address, items
                (JSON string) and created_at
        
        Returns:
            Created order
        """
        with self.session_factory() as session:
            order = Order(**order_data)
            session.add(order)
            session.commit()
            return order
    
    def get_by_id(self, order_id: str) -> Optional[Order]:
        """Get the full order row by ID"""
        with self.session_factory() as session:
            return session.query(Order).filter(Order.id == order_id).first()
    
    def get_all(self) -> List[Dict]:
        """Get every order without items, newest first"""
        with self.session_factory() as session:
            rows = session.query(
                Order.id,
                Order.name,
                Order.phone,
                Order.address,
                Order.created_at
            ).order_by(
                desc(Order.created_at),
                desc(Order.id)
            ).all()
            return [row._asdict() for row in rows]
