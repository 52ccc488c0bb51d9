# catalog/repos/assignment_repo.py
from datetime import datetime, timezone
from typing import List

from catalog.data.store import CatalogStore
from catalog.domain.schemas import Assignment


class AssignmentRepo:
    def __init__(self, store: CatalogStore):
        self.store = store

    def create_assignment(self, account_id: str, product_id: str) -> Assignment:
        with self.store.lock:
            assignment = Assignment(
                id=self.store.next_assignment_id(),
                account_id=account_id,
                product_id=product_id,
                created_at=datetime.now(timezone.utc),
            )
            self.store.assignments.setdefault(account_id, []).append(assignment)
        return assignment

    def list_for_account(self, account_id: str) -> List[Assignment]:
        with self.store.lock:
            return list(self.store.assignments.get(account_id, []))
