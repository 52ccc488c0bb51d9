# catalog/api/routers/assignments.py
from fastapi import APIRouter, Depends, Query

from catalog.api.deps import get_assignment_service
from catalog.domain.schemas import AssignmentListOut
from catalog.services.assignment_service import AssignmentService

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("", response_model=AssignmentListOut)
def list_assignments(
    account_id: str | None = Query(None, alias="accountId"),
    svc: AssignmentService = Depends(get_assignment_service),
):
    return AssignmentListOut(assignments=svc.list_assignments(account_id))
