"""SQLAlchemy implementation of the check-in repository interface."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, tzinfo

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, SystemClock
from app.core.exceptions import MaxNumberOfCheckInsError
from app.models.check_in import CheckIn
from app.repositories.interfaces import PAGE_SIZE, CheckInRepository, page_offset
from app.utils.datetime import as_aware, calendar_day, day_bounds

UNIQUE_PER_DAY_CONSTRAINT = "uq_check_ins_user_id_check_in_date"


class SqlAlchemyCheckInRepository(CheckInRepository):
    """Default SQLAlchemy-backed implementation."""

    def __init__(
        self,
        session: AsyncSession,
        clock: Clock | None = None,
        tz: tzinfo = UTC,
    ) -> None:
        self._session = session
        self._clock = clock or SystemClock()
        self._tz = tz

    async def create(
        self,
        *,
        user_id: str,
        gym_id: str,
        created_at: datetime | None = None,
    ) -> CheckIn:
        moment = as_aware(created_at or self._clock.now(), self._tz)
        check_in = CheckIn(
            id=str(uuid.uuid4()),
            user_id=user_id,
            gym_id=gym_id,
            created_at=moment,
            validated_at=None,
            check_in_date=calendar_day(moment, self._tz),
        )
        self._session.add(check_in)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if UNIQUE_PER_DAY_CONSTRAINT in str(exc.orig):
                raise MaxNumberOfCheckInsError() from exc
            raise
        return check_in

    async def find_by_id(self, check_in_id: str) -> CheckIn | None:
        return await self._session.get(CheckIn, check_in_id)

    async def find_by_user_id_on_date(self, user_id: str, moment: datetime) -> CheckIn | None:
        start, end = day_bounds(moment, self._tz)
        stmt = (
            select(CheckIn)
            .where(
                CheckIn.user_id == user_id,
                CheckIn.created_at >= start,
                CheckIn.created_at < end,
            )
            .limit(1)
        )
        return await self._session.scalar(stmt)

    async def find_many_by_user_id(self, user_id: str, page: int) -> list[CheckIn]:
        stmt = (
            select(CheckIn)
            .where(CheckIn.user_id == user_id)
            .order_by(CheckIn.created_at.asc(), CheckIn.id.asc())
            .offset(page_offset(page))
            .limit(PAGE_SIZE)
        )
        return list((await self._session.scalars(stmt)).all())

    async def count_by_user_id(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(CheckIn).where(CheckIn.user_id == user_id)
        count = await self._session.scalar(stmt)
        return int(count or 0)

    async def save(self, check_in: CheckIn) -> CheckIn:
        self._session.add(check_in)
        await self._session.flush()
        return check_in
