"""Repository abstractions for the service layer."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from app.models.check_in import CheckIn
from app.models.gym import Gym
from app.utils.geo import Coordinate
from app.utils.paging import PAGE_SIZE, page_offset

__all__ = ["PAGE_SIZE", "NEARBY_RADIUS_KM", "page_offset", "GymRepository", "CheckInRepository"]

NEARBY_RADIUS_KM = 10.0


class GymRepository(Protocol):
    """Repository boundary for gym records."""

    async def create(
        self,
        *,
        title: str,
        latitude: float | Decimal,
        longitude: float | Decimal,
        description: str | None = None,
        phone: str | None = None,
        id: str | None = None,
    ) -> Gym: ...

    async def find_by_id(self, gym_id: str) -> Gym | None: ...

    async def search_many(self, query: str, page: int) -> list[Gym]: ...

    async def find_many_nearby(self, center: Coordinate) -> list[Gym]: ...


class CheckInRepository(Protocol):
    """Repository boundary for check-in records."""

    async def create(
        self,
        *,
        user_id: str,
        gym_id: str,
        created_at: datetime | None = None,
    ) -> CheckIn: ...

    async def find_by_id(self, check_in_id: str) -> CheckIn | None: ...

    async def find_by_user_id_on_date(self, user_id: str, moment: datetime) -> CheckIn | None: ...

    async def find_many_by_user_id(self, user_id: str, page: int) -> list[CheckIn]: ...

    async def count_by_user_id(self, user_id: str) -> int: ...

    async def save(self, check_in: CheckIn) -> CheckIn: ...
