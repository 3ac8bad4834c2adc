"""Gym search use case implemented with the repository boundary."""

from __future__ import annotations

from collections.abc import Callable

from app.infra.unit_of_work import UnitOfWork
from app.models.gym import Gym

UnitOfWorkFactory = Callable[[], UnitOfWork]


class GymSearchService:
    """Use case for searching gyms by title with fixed-size pages."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def search(self, *, query: str, page: int) -> list[Gym]:
        async with self._uow_factory() as uow:
            return await uow.gyms.search_many(query, page)
