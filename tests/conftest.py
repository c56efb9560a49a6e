"""Pytest fixtures for Storefront API tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from storefront.database import Base, create_session_factory
from storefront.main import create_app
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_store import InMemoryProductStore


SAMPLE_PRODUCTS = {
    "mug-001": {"id": "mug-001", "name": "Ceramic Mug", "price": 12.5},
    "tee-002": {"id": "tee-002", "name": "Cotton T-Shirt", "price": 20},
    "cap-003": {"id": "cap-003", "name": "Baseball Cap", "price": 15},
}


def _memory_engine():
    # One shared connection so every session sees the same in-memory database
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )


@pytest.fixture
def engine():
    """In-memory SQLite engine with the orders table created."""
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def bare_engine():
    """In-memory SQLite engine without any tables."""
    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def order_repository(engine):
    return OrderRepository(create_session_factory(engine))


@pytest.fixture
def product_store():
    return InMemoryProductStore(SAMPLE_PRODUCTS)


@pytest.fixture
def make_client():
    """Build a TestClient around arbitrary store bindings."""
    def _make(product_store=None, order_store=None):
        return TestClient(create_app(product_store=product_store, order_store=order_store))
    return _make


@pytest.fixture
def client(make_client, product_store, order_repository):
    """Client with both stores configured."""
    return make_client(product_store=product_store, order_store=order_repository)
