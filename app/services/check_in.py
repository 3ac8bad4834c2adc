"""Check-in use cases: distance and once-per-day gating, late validation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

import structlog

from app.core.clock import Clock, SystemClock
from app.core.exceptions import (
    LateCheckInValidationError,
    MaxDistanceError,
    MaxNumberOfCheckInsError,
    ResourceNotFoundError,
)
from app.infra.unit_of_work import UnitOfWork
from app.models.check_in import CheckIn
from app.utils.datetime import as_aware
from app.utils.geo import Coordinate, distance_between

UnitOfWorkFactory = Callable[[], UnitOfWork]

MAX_DISTANCE_IN_METERS = 100
VALIDATION_WINDOW = timedelta(minutes=20)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckInRequest:
    user_id: str
    gym_id: str
    user_latitude: float
    user_longitude: float


class CheckInService:
    """Use cases for recording and validating check-ins."""

    def __init__(self, uow_factory: UnitOfWorkFactory, clock: Clock | None = None) -> None:
        self._uow_factory = uow_factory
        self._clock = clock or SystemClock()

    async def check_in(self, request: CheckInRequest) -> CheckIn:
        async with self._uow_factory() as uow:
            return await check_in(uow, request, now=self._clock.now())

    async def validate(self, check_in_id: str) -> CheckIn:
        async with self._uow_factory() as uow:
            return await validate_check_in(uow, check_in_id, now=self._clock.now())


async def check_in(uow: UnitOfWork, request: CheckInRequest, *, now: datetime) -> CheckIn:
    """Record a check-in once the gym exists, is within range and none exists today.

    Raises:
        ResourceNotFoundError: the gym does not exist.
        MaxDistanceError: the user is more than 100 metres from the gym.
        MaxNumberOfCheckInsError: the user already checked in on this calendar day.
    """
    gym = await uow.gyms.find_by_id(request.gym_id)
    if gym is None:
        logger.info("check_in_rejected", reason="gym_not_found", gym_id=request.gym_id)
        raise ResourceNotFoundError()

    distance_m = (
        distance_between(
            Coordinate(request.user_latitude, request.user_longitude),
            Coordinate(gym.latitude, gym.longitude),
        )
        * 1000
    )
    if distance_m > MAX_DISTANCE_IN_METERS:
        logger.info(
            "check_in_rejected",
            reason="max_distance",
            gym_id=gym.id,
            user_id=request.user_id,
            distance_m=round(distance_m, 3),
        )
        raise MaxDistanceError()

    existing = await uow.check_ins.find_by_user_id_on_date(request.user_id, now)
    if existing is not None:
        logger.info(
            "check_in_rejected",
            reason="max_check_ins_per_day",
            user_id=request.user_id,
            existing_check_in_id=existing.id,
        )
        raise MaxNumberOfCheckInsError()

    created = await uow.check_ins.create(
        user_id=request.user_id, gym_id=request.gym_id, created_at=now
    )
    logger.info(
        "check_in_created",
        check_in_id=created.id,
        gym_id=created.gym_id,
        user_id=created.user_id,
        distance_m=round(distance_m, 3),
    )
    return created


async def validate_check_in(uow: UnitOfWork, check_in_id: str, *, now: datetime) -> CheckIn:
    check_in = await uow.check_ins.find_by_id(check_in_id)
    if check_in is None:
        raise ResourceNotFoundError()

    created_at = as_aware(check_in.created_at)
    if as_aware(now) - created_at > VALIDATION_WINDOW:
        logger.info("check_in_validation_rejected", check_in_id=check_in_id, reason="late")
        raise LateCheckInValidationError()

    check_in.validated_at = now
    saved = await uow.check_ins.save(check_in)
    logger.info("check_in_validated", check_in_id=saved.id, user_id=saved.user_id)
    return saved
