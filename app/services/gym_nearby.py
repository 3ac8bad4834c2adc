"""Nearby gyms use case (every gym within 10 km of the user)."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from app.infra.unit_of_work import UnitOfWork
from app.models.gym import Gym
from app.utils.geo import Coordinate

UnitOfWorkFactory = Callable[[], UnitOfWork]


class GymNearbyService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def nearby(self, *, user_latitude: float, user_longitude: float) -> list[Gym]:
        async with self._uow_factory() as uow:
            gyms = await uow.gyms.find_many_nearby(Coordinate(user_latitude, user_longitude))
        structlog.get_logger(__name__).info(
            "gyms_nearby",
            lat=float(user_latitude),
            lng=float(user_longitude),
            returned=len(gyms),
        )
        return gyms
