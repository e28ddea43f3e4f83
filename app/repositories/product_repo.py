# app/repositories/product_repo.py
from app.schemas.product import Product

# Seed catalog served by the storefront
SEED_PRODUCTS: list[dict] = [
    {
        "productId": 1,
        "supplierId": 1,
        "name": "SmartFeeder One",
        "description": "App-controlled feeder with portion scheduling",
        "price": 129.99,
        "sku": "CAT-FEED-001",
        "unit": "piece",
        "imgName": "smart-feeder.png",
    },
    {
        "productId": 2,
        "supplierId": 1,
        "name": "Laser Chase Pro",
        "description": "Automatic laser toy with random patterns",
        "price": 40.0,
        "sku": "CAT-TOY-002",
        "unit": "piece",
        "imgName": "laser-chase.png",
        "discount": 0.25,
    },
    {
        "productId": 3,
        "supplierId": 2,
        "name": "Self-Cleaning Litter Box",
        "description": "Sensor-driven litter box with odor filter",
        "price": 249.0,
        "sku": "CAT-LIT-003",
        "unit": "piece",
        "imgName": "litter-box.png",
        "discount": 0.1,
    },
    {
        "productId": 4,
        "supplierId": 2,
        "name": "Fountain Flow",
        "description": "Filtered water fountain, 2.5 litres",
        "price": 50.0,
        "sku": "CAT-WAT-004",
        "unit": "piece",
        "imgName": "fountain.png",
    },
    {
        "productId": 5,
        "supplierId": 3,
        "name": "Catnip Refill Pack",
        "description": "Organic catnip, pack of three pouches",
        "price": 12.5,
        "sku": "CAT-NIP-005",
        "unit": "pack",
        "imgName": "catnip.png",
    },
]


class ProductRepository:
    """
    Read-only, in-memory product catalog.

    - Seeded from SEED_PRODUCTS; reset() restores the seed.
    - No business logic.
    """

    def __init__(self, seed: list[dict] | None = None):
        self._seed = SEED_PRODUCTS if seed is None else seed
        self._products: dict[int, Product] = {}
        self.reset()

    def reset(self) -> None:
        products = [Product.model_validate(p) for p in self._seed]
        self._products = {p.product_id: p for p in products}

    def get_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def list(self, skip: int = 0, limit: int = 50) -> list[Product]:
        return list(self._products.values())[skip : skip + limit]
