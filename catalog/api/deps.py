# catalog/api/deps.py
from fastapi import Request

from catalog.services.assignment_service import AssignmentService
from catalog.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    return ProductService(request.app.state.store)


def get_assignment_service(request: Request) -> AssignmentService:
    state = request.app.state
    return AssignmentService(
        store=state.store,
        accounts_client=state.accounts_client,
        charge_on_assign=state.charge_on_assign,
    )
