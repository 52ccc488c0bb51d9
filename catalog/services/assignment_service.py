# catalog/services/assignment_service.py
from typing import Any, List, Protocol, Tuple

from pydantic import ValidationError as SchemaError

from catalog.data.store import CatalogStore
from catalog.domain.errors import InternalError, NotFoundError, ValidationError
from catalog.domain.schemas import Assignment, Charge
from catalog.repos.assignment_repo import AssignmentRepo
from catalog.repos.product_repo import ProductRepo
from catalog.utils.numbers import is_number
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class AccountsGateway(Protocol):
    def get_account(self, account_id: str) -> dict: ...

    def credit_account(self, account_id: str, amount: int | float) -> dict: ...


class AssignmentService:
    """
    Assigns products to accounts held by the accounts service.

    With charge_on_assign the account is debited by the product price after
    the assignment is stored. A failed debit is reported to the caller but the
    assignment is kept.
    """

    def __init__(
        self,
        store: CatalogStore,
        accounts_client: AccountsGateway,
        charge_on_assign: bool = False,
    ):
        self.products = ProductRepo(store)
        self.repo = AssignmentRepo(store)
        self.accounts_client = accounts_client
        self.charge_on_assign = charge_on_assign

    def assign_product(
        self, product_id: str, account_id: Any
    ) -> Tuple[Assignment, Charge | None]:
        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("product not found")
        if not account_id:
            raise ValidationError("accountId is required")
        if is_number(account_id):
            account_id = str(account_id)
        elif not isinstance(account_id, str):
            raise ValidationError("accountId must be a string")

        # CollaboratorError propagates, nothing is stored
        self.accounts_client.get_account(account_id)

        assignment = self.repo.create_assignment(account_id, product.id)
        logger.info(f"Assigned product {product.id} to account {account_id} as {assignment.id}")

        charge = None
        if self.charge_on_assign and is_number(product.price):
            result = self.accounts_client.credit_account(account_id, -product.price)
            try:
                charge = Charge.model_validate(result)
            except SchemaError as e:
                raise InternalError(f"unexpected charge response: {result}") from e
            logger.info(f"Charged account {account_id} {product.price}, balance {charge.balance}")

        return assignment, charge

    def list_assignments(self, account_id: str | None) -> List[Assignment]:
        if not account_id:
            raise ValidationError("accountId query is required")
        return self.repo.list_for_account(account_id)
