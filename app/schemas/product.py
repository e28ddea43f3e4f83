# app/schemas/product.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """
    Catalog product as served by the products API.

    The cart only snapshots productId, name, price, imgName and discount.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: int
    supplier_id: int
    name: str
    description: str = ""
    price: float = Field(ge=0)
    sku: str = ""
    unit: str = "piece"
    img_name: str = ""
    discount: float | None = Field(default=None, ge=0, lt=1)
