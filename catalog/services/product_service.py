# catalog/services/product_service.py
from typing import List

from catalog.data.store import CatalogStore
from catalog.domain.errors import NotFoundError, ValidationError
from catalog.domain.schemas import Product, ProductCreate
from catalog.repos.product_repo import ProductRepo
from catalog.utils.numbers import is_number
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORY = "general"


class ProductService:
    def __init__(self, store: CatalogStore):
        self.repo = ProductRepo(store)

    def create_product(self, payload: ProductCreate) -> Product:
        if not payload.name:
            raise ValidationError("name is required")
        if not isinstance(payload.name, str):
            raise ValidationError("name must be a string")
        if not is_number(payload.price):
            raise ValidationError("price must be a number")

        category = payload.category if payload.category is not None else DEFAULT_CATEGORY
        if not isinstance(category, str):
            raise ValidationError("category must be a string")
        product = self.repo.create_product(payload.name, payload.price, category)

        logger.info(f"Created product {product.id} ({product.name}) in {product.category}")
        return product

    def list_products(self, category: str | None = None) -> List[Product]:
        return self.repo.list_products(category)

    def get_product(self, product_id: str) -> Product:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("product not found")
        return product
