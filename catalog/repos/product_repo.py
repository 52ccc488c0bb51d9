# catalog/repos/product_repo.py
from typing import List

from catalog.data.store import CatalogStore
from catalog.domain.schemas import Product


class ProductRepo:
    def __init__(self, store: CatalogStore):
        self.store = store

    def create_product(self, name: str, price: int | float, category: str) -> Product:
        with self.store.lock:
            product = Product(
                id=self.store.next_product_id(),
                name=name,
                price=price,
                category=category,
            )
            self.store.products[product.id] = product
        return product

    def get_product(self, product_id: str) -> Product | None:
        with self.store.lock:
            return self.store.products.get(product_id)

    def list_products(self, category: str | None = None) -> List[Product]:
        with self.store.lock:
            products = list(self.store.products.values())
        if not category:
            return products
        return [p for p in products if p.category == category]
