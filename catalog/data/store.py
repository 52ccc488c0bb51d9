# catalog/data/store.py
import threading
from typing import Dict, List

from catalog.domain.schemas import Assignment, Product


class CatalogStore:
    """
    In-memory state of the catalog: products by id, assignments by account id
    and the two id counters.

    Handlers run on a threadpool, so every read and write goes through `lock`.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.products: Dict[str, Product] = {}
        self.assignments: Dict[str, List[Assignment]] = {}
        self._product_counter = 1
        self._assignment_counter = 1

    def next_product_id(self) -> str:
        # caller holds the lock
        product_id = f"p{self._product_counter}"
        self._product_counter += 1
        return product_id

    def next_assignment_id(self) -> str:
        # caller holds the lock
        assignment_id = f"as{self._assignment_counter}"
        self._assignment_counter += 1
        return assignment_id
