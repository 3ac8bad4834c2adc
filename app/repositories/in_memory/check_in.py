"""In-memory check-in repository used by tests and local runs."""

from __future__ import annotations

import asyncio
import uuid
from datetime import UTC, datetime, tzinfo

from app.core.clock import Clock, SystemClock
from app.core.exceptions import MaxNumberOfCheckInsError
from app.models.check_in import CheckIn
from app.repositories.interfaces import PAGE_SIZE, CheckInRepository, page_offset
from app.utils.datetime import as_aware, calendar_day, day_bounds


class InMemoryCheckInRepository(CheckInRepository):
    """List-backed implementation.

    ``create`` re-checks the (user, calendar day) key under a lock, mirroring the
    unique constraint of the SQL table, so concurrent attempts cannot both succeed.
    """

    def __init__(self, clock: Clock | None = None, tz: tzinfo = UTC) -> None:
        self.check_ins: list[CheckIn] = []
        self._clock = clock or SystemClock()
        self._tz = tz
        self._lock = asyncio.Lock()

    async def create(
        self,
        *,
        user_id: str,
        gym_id: str,
        created_at: datetime | None = None,
    ) -> CheckIn:
        moment = as_aware(created_at or self._clock.now(), self._tz)
        day = calendar_day(moment, self._tz)
        async with self._lock:
            if any(c.user_id == user_id and c.check_in_date == day for c in self.check_ins):
                raise MaxNumberOfCheckInsError()
            check_in = CheckIn(
                id=str(uuid.uuid4()),
                user_id=user_id,
                gym_id=gym_id,
                created_at=moment,
                validated_at=None,
                check_in_date=day,
            )
            self.check_ins.append(check_in)
        return check_in

    async def find_by_id(self, check_in_id: str) -> CheckIn | None:
        return next((c for c in self.check_ins if c.id == check_in_id), None)

    async def find_by_user_id_on_date(self, user_id: str, moment: datetime) -> CheckIn | None:
        start, end = day_bounds(moment, self._tz)
        return next(
            (
                c
                for c in self.check_ins
                if c.user_id == user_id and start <= as_aware(c.created_at, self._tz) < end
            ),
            None,
        )

    async def find_many_by_user_id(self, user_id: str, page: int) -> list[CheckIn]:
        offset = page_offset(page)
        owned = sorted(
            (c for c in self.check_ins if c.user_id == user_id),
            key=lambda c: as_aware(c.created_at, self._tz),
        )
        return owned[offset : offset + PAGE_SIZE]

    async def count_by_user_id(self, user_id: str) -> int:
        return sum(1 for c in self.check_ins if c.user_id == user_id)

    async def save(self, check_in: CheckIn) -> CheckIn:
        for index, existing in enumerate(self.check_ins):
            if existing.id == check_in.id:
                self.check_ins[index] = check_in
                break
        return check_in
