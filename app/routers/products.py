# app/routers/products.py
from fastapi import APIRouter

from app.repositories.product_repo import ProductRepository
from app.schemas.product import Product
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[Product])
def list_products(skip: int = 0, limit: int = 50):
    """
    List catalog products.
    """
    return service.list_products(skip=skip, limit=limit)


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int):
    """
    Get a single product by id.

    404 if the product does not exist.
    """
    return service.get_product(product_id)
