"""In-memory gym repository used by tests and local runs."""

from __future__ import annotations

import uuid
from decimal import Decimal

from app.core.clock import Clock, SystemClock
from app.models.gym import Gym
from app.repositories.interfaces import NEARBY_RADIUS_KM, PAGE_SIZE, GymRepository, page_offset
from app.utils.geo import Coordinate, distance_between, to_decimal_degrees


class InMemoryGymRepository(GymRepository):
    """List-backed implementation; every query is a linear scan."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.gyms: list[Gym] = []
        self._clock = clock or SystemClock()

    async def create(
        self,
        *,
        title: str,
        latitude: float | Decimal,
        longitude: float | Decimal,
        description: str | None = None,
        phone: str | None = None,
        id: str | None = None,
    ) -> Gym:
        gym = Gym(
            id=id or str(uuid.uuid4()),
            title=title,
            description=description,
            phone=phone,
            latitude=to_decimal_degrees(latitude),
            longitude=to_decimal_degrees(longitude),
            created_at=self._clock.now(),
        )
        self.gyms.append(gym)
        return gym

    async def find_by_id(self, gym_id: str) -> Gym | None:
        return next((gym for gym in self.gyms if gym.id == gym_id), None)

    async def search_many(self, query: str, page: int) -> list[Gym]:
        offset = page_offset(page)
        matches = [gym for gym in self.gyms if query in gym.title]
        return matches[offset : offset + PAGE_SIZE]

    async def find_many_nearby(self, center: Coordinate) -> list[Gym]:
        return [
            gym
            for gym in self.gyms
            if distance_between(center, Coordinate(gym.latitude, gym.longitude))
            < NEARBY_RADIUS_KM
        ]
