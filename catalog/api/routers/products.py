# catalog/api/routers/products.py
from fastapi import APIRouter, Depends, Query

from catalog.api.deps import get_assignment_service, get_product_service
from catalog.domain.schemas import (
    AssignmentCreate,
    AssignmentOut,
    ProductCreate,
    ProductListOut,
    ProductOut,
)
from catalog.services.assignment_service import AssignmentService
from catalog.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate | None = None,
    svc: ProductService = Depends(get_product_service),
):
    product = svc.create_product(payload or ProductCreate())
    return ProductOut(product=product)


# declared before /{product_id} so "all" is not taken for an id
@router.get("/all", response_model=ProductListOut)
def list_all_products(svc: ProductService = Depends(get_product_service)):
    return ProductListOut(products=svc.list_products())


@router.get("", response_model=ProductListOut)
def list_products(
    category: str | None = Query(None),
    svc: ProductService = Depends(get_product_service),
):
    return ProductListOut(products=svc.list_products(category))


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, svc: ProductService = Depends(get_product_service)):
    return ProductOut(product=svc.get_product(product_id))


@router.post(
    "/{product_id}/assign",
    response_model=AssignmentOut,
    response_model_exclude_none=True,
    status_code=201,
)
def assign_product(
    product_id: str,
    payload: AssignmentCreate | None = None,
    svc: AssignmentService = Depends(get_assignment_service),
):
    """
    Assigns the product to an account. When charging is enabled the response
    carries the account's new balance under "charge".
    """
    account_id = payload.account_id if payload else None
    assignment, charge = svc.assign_product(product_id, account_id)
    return AssignmentOut(assignment=assignment, charge=charge)
