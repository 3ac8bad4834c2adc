"""/gyms routers that delegate to services via DI."""

from fastapi import APIRouter, Depends, Query

from app.api.deps import (
    get_check_in_service,
    get_gym_create_service,
    get_gym_nearby_service,
    get_gym_search_service,
)
from app.schemas.check_in import CheckInCreateRequest, CheckInItem, CheckInResponse
from app.schemas.common import ErrorResponse
from app.schemas.gym import GymCreateRequest, GymItem, GymListResponse, GymResponse
from app.services.check_in import CheckInRequest, CheckInService
from app.services.gym_create import GymCreateCommand, GymCreateService
from app.services.gym_nearby import GymNearbyService
from app.services.gym_search import GymSearchService

router = APIRouter(prefix="/gyms", tags=["gyms"])


@router.post(
    "",
    status_code=201,
    response_model=GymResponse,
    summary="Create a gym",
    responses={422: {"model": ErrorResponse, "description": "validation error"}},
)
async def create_gym(
    payload: GymCreateRequest,
    svc: GymCreateService = Depends(get_gym_create_service),
):
    gym = await svc.create(
        GymCreateCommand(
            title=payload.title,
            description=payload.description,
            phone=payload.phone,
            latitude=payload.latitude,
            longitude=payload.longitude,
        )
    )
    return GymResponse(gym=GymItem.model_validate(gym))


@router.get(
    "/search",
    response_model=GymListResponse,
    summary="Search gyms by title",
    description="Substring match on the title, 20 gyms per page (page starts at 1).",
)
async def search_gyms(
    q: str = Query("", description="Text contained in the gym title"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    svc: GymSearchService = Depends(get_gym_search_service),
):
    gyms = await svc.search(query=q, page=page)
    return GymListResponse(gyms=[GymItem.model_validate(g) for g in gyms])


@router.get(
    "/nearby",
    response_model=GymListResponse,
    summary="Gyms within 10 km",
    description="Every gym closer than 10 km (haversine) to the given coordinates.",
    responses={422: {"model": ErrorResponse, "description": "validation error"}},
)
async def gyms_nearby(
    latitude: float = Query(..., ge=-90.0, le=90.0, description="Latitude (-90..90)"),
    longitude: float = Query(..., ge=-180.0, le=180.0, description="Longitude (-180..180)"),
    svc: GymNearbyService = Depends(get_gym_nearby_service),
):
    gyms = await svc.nearby(user_latitude=latitude, user_longitude=longitude)
    return GymListResponse(gyms=[GymItem.model_validate(g) for g in gyms])


@router.post(
    "/{gym_id}/check-ins",
    status_code=201,
    response_model=CheckInResponse,
    summary="Check in at a gym",
    responses={
        400: {"model": ErrorResponse, "description": "Too far from the gym"},
        404: {"model": ErrorResponse, "description": "Gym not found"},
        409: {"model": ErrorResponse, "description": "Already checked in today"},
        422: {"model": ErrorResponse, "description": "validation error"},
    },
)
async def create_check_in(
    gym_id: str,
    payload: CheckInCreateRequest,
    svc: CheckInService = Depends(get_check_in_service),
):
    check_in = await svc.check_in(
        CheckInRequest(
            user_id=payload.user_id,
            gym_id=gym_id,
            user_latitude=payload.latitude,
            user_longitude=payload.longitude,
        )
    )
    return CheckInResponse(check_in=CheckInItem.model_validate(check_in))
