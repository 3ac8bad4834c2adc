"""Read-side use cases over a user's check-ins."""

from __future__ import annotations

from collections.abc import Callable

from app.infra.unit_of_work import UnitOfWork
from app.models.check_in import CheckIn

UnitOfWorkFactory = Callable[[], UnitOfWork]


class CheckInHistoryService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def history(self, *, user_id: str, page: int) -> list[CheckIn]:
        async with self._uow_factory() as uow:
            return await uow.check_ins.find_many_by_user_id(user_id, page)

    async def metrics(self, *, user_id: str) -> int:
        """Return how many check-ins the user has ever made."""
        async with self._uow_factory() as uow:
            return await uow.check_ins.count_by_user_id(user_id)
