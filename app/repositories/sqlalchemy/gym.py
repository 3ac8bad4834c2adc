"""SQLAlchemy implementation of the gym repository interface."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, SystemClock
from app.models.gym import Gym
from app.repositories.interfaces import NEARBY_RADIUS_KM, PAGE_SIZE, GymRepository, page_offset
from app.utils.geo import EARTH_RADIUS_KM, Coordinate, to_decimal_degrees


def _haversine_km_expr(center: Coordinate):  # type: ignore[no-untyped-def]
    """Haversine distance from ``center`` to each gym row, evaluated in SQL."""
    lat_rad = func.radians(Gym.latitude)
    lng_rad = func.radians(Gym.longitude)
    lat0_rad = func.radians(literal(float(center.latitude)))
    lng0_rad = func.radians(literal(float(center.longitude)))

    dlat = lat_rad - lat0_rad
    dlng = lng_rad - lng0_rad

    a = func.pow(func.sin(dlat / 2.0), 2) + func.cos(lat0_rad) * func.cos(lat_rad) * func.pow(
        func.sin(dlng / 2.0), 2
    )
    c = 2.0 * func.asin(func.sqrt(func.least(1.0, a)))
    return EARTH_RADIUS_KM * c


class SqlAlchemyGymRepository(GymRepository):
    """Default SQLAlchemy-backed implementation."""

    def __init__(self, session: AsyncSession, clock: Clock | None = None) -> None:
        self._session = session
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
        self._session.add(gym)
        await self._session.flush()
        return gym

    async def find_by_id(self, gym_id: str) -> Gym | None:
        return await self._session.get(Gym, gym_id)

    async def search_many(self, query: str, page: int) -> list[Gym]:
        # LIKE is case-sensitive on PostgreSQL
        stmt = (
            select(Gym)
            .where(Gym.title.contains(query, autoescape=True))
            .order_by(Gym.created_at.asc(), Gym.id.asc())
            .offset(page_offset(page))
            .limit(PAGE_SIZE)
        )
        return list((await self._session.scalars(stmt)).all())

    async def find_many_nearby(self, center: Coordinate) -> list[Gym]:
        stmt = (
            select(Gym)
            .where(_haversine_km_expr(center) < NEARBY_RADIUS_KM)
            .order_by(Gym.created_at.asc(), Gym.id.asc())
        )
        return list((await self._session.scalars(stmt)).all())
