"""Gym creation use case."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from app.infra.unit_of_work import UnitOfWork
from app.models.gym import Gym

UnitOfWorkFactory = Callable[[], UnitOfWork]


@dataclass(frozen=True)
class GymCreateCommand:
    title: str
    latitude: float
    longitude: float
    description: str | None = None
    phone: str | None = None
    id: str | None = None


class GymCreateService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def create(self, command: GymCreateCommand) -> Gym:
        async with self._uow_factory() as uow:
            return await create_gym(uow, command)


async def create_gym(uow: UnitOfWork, command: GymCreateCommand) -> Gym:
    gym = await uow.gyms.create(
        id=command.id,
        title=command.title,
        description=command.description,
        phone=command.phone,
        latitude=command.latitude,
        longitude=command.longitude,
    )
    structlog.get_logger(__name__).info("gym_created", gym_id=gym.id, title=gym.title)
    return gym
