"""
Shared fixtures for the cart test suite.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from app.main import create_app
from app.repositories.cart_store import InMemoryCartStore
from app.repositories.product_repo import ProductRepository
from app.schemas.product import Product
from app.services.cart_service import CartService


class RecordingCartStore(InMemoryCartStore):
    """In-memory store that counts save() calls."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saves = 0

    def save(self, items):
        self.saves += 1
        super().save(items)


@pytest.fixture
def store() -> RecordingCartStore:
    return RecordingCartStore()


@pytest.fixture
def cart(store: RecordingCartStore) -> CartService:
    return CartService(store)


@pytest.fixture
def catalog() -> ProductRepository:
    return ProductRepository()


@pytest.fixture
def feeder() -> Product:
    return Product(
        product_id=1,
        supplier_id=1,
        name="SmartFeeder One",
        price=50.0,
        img_name="smart-feeder.png",
        discount=0,
    )


@pytest.fixture
def laser() -> Product:
    return Product(
        product_id=2,
        supplier_id=1,
        name="Laser Chase Pro",
        price=40.0,
        img_name="laser-chase.png",
        discount=0.25,
    )


@pytest.fixture
def catnip() -> Product:
    return Product(
        product_id=5,
        supplier_id=3,
        name="Catnip Refill Pack",
        price=12.5,
        img_name="catnip.png",
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app_store() -> InMemoryCartStore:
    return InMemoryCartStore()


@pytest.fixture
def test_client(app_store: InMemoryCartStore):
    """Storefront API with the cart session open (lifespan running)."""
    app = create_app(cart_store=app_store)
    with TestClient(app) as client:
        yield client
