"""
SQLAlchemy Order model
"""
from sqlalchemy import Column, Integer, Text, Index

from storefront.database import Base


class Order(Base):
    """Order database model, mirrors schema.sql"""
    
    __tablename__ = "orders"
    
    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    items = Column(Text, nullable=False)  # JSON array of {id, quantity}
    created_at = Column(Integer, nullable=False)  # Unix seconds
    
    def __repr__(self):
        return f"<Order(id='{self.id}', name='{self.name}', created_at={self.created_at})>"


Index("idx_orders_created_at", Order.created_at.desc())
Index("idx_orders_phone", Order.phone)
