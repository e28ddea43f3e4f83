# app/services/product_service.py
from fastapi import HTTPException, status

from app.repositories.product_repo import ProductRepository
from app.schemas.product import Product


class ProductService:
    """
    Catalog lookups used by the products and cart endpoints.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, skip: int = 0, limit: int = 50) -> list[Product]:
        return self.repo.list(skip=skip, limit=limit)

    def get_product(self, product_id: int) -> Product:
        """
        Raises:
            HTTPException(404): if the product is not in the catalog.
        """
        product = self.repo.get_by_id(product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product
