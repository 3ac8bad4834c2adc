"""/check-ins routers: validation, history and metrics."""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_check_in_history_service, get_check_in_service
from app.schemas.check_in import (
    CheckInHistoryResponse,
    CheckInItem,
    CheckInMetricsResponse,
    CheckInResponse,
)
from app.schemas.common import ErrorResponse
from app.services.check_in import CheckInService
from app.services.check_in_history import CheckInHistoryService

router = APIRouter(prefix="/check-ins", tags=["check-ins"])

_USER_ID = Query(..., min_length=1, max_length=128, description="User ID")


@router.patch(
    "/{check_in_id}/validate",
    response_model=CheckInResponse,
    summary="Validate a check-in",
    description="Allowed only within 20 minutes of the check-in creation.",
    responses={
        400: {"model": ErrorResponse, "description": "Validation window elapsed"},
        404: {"model": ErrorResponse, "description": "Check-in not found"},
    },
)
async def validate_check_in(
    check_in_id: str,
    svc: CheckInService = Depends(get_check_in_service),
):
    check_in = await svc.validate(check_in_id)
    return CheckInResponse(check_in=CheckInItem.model_validate(check_in))


@router.get(
    "/history",
    response_model=CheckInHistoryResponse,
    summary="Check-in history of a user",
)
async def check_in_history(
    user_id: str = _USER_ID,
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    svc: CheckInHistoryService = Depends(get_check_in_history_service),
):
    check_ins = await svc.history(user_id=user_id, page=page)
    return CheckInHistoryResponse(check_ins=[CheckInItem.model_validate(c) for c in check_ins])


@router.get(
    "/metrics",
    response_model=CheckInMetricsResponse,
    summary="Check-in count of a user",
)
async def check_in_metrics(
    user_id: str = _USER_ID,
    svc: CheckInHistoryService = Depends(get_check_in_history_service),
):
    count = await svc.metrics(user_id=user_id)
    return CheckInMetricsResponse(check_ins_count=count)
