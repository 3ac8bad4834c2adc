"""Unit of Work abstraction used by the service layer."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from datetime import UTC, tzinfo
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.clock import Clock, SystemClock
from app.repositories.in_memory import InMemoryCheckInRepository, InMemoryGymRepository
from app.repositories.interfaces import CheckInRepository, GymRepository
from app.repositories.sqlalchemy import SqlAlchemyCheckInRepository, SqlAlchemyGymRepository


class UnitOfWork(Protocol, AbstractAsyncContextManager["UnitOfWork"]):
    """Defines the repository boundary exposed to services."""

    gyms: GymRepository
    check_ins: CheckInRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work backed by SQLAlchemy async sessions."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        clock: Clock | None = None,
        tz: tzinfo = UTC,
    ) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self._clock = clock or SystemClock()
        self._tz = tz
        self.gyms: GymRepository
        self.check_ins: CheckInRepository

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        session = self._session_factory()
        self._session = session
        self.gyms = SqlAlchemyGymRepository(session, clock=self._clock)
        self.check_ins = SqlAlchemyCheckInRepository(session, clock=self._clock, tz=self._tz)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is None:
            return
        try:
            if exc_type:
                await self._session.rollback()
            else:
                await self._session.commit()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        if self._session is not None:
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork session is not initialized. Use within context manager.")
        return self._session


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of Work over process-local repositories.

    The repositories outlive each ``async with`` block, so one instance can be
    handed out by a factory and shared by every service call.
    """

    def __init__(self, *, clock: Clock | None = None, tz: tzinfo = UTC) -> None:
        clock = clock or SystemClock()
        self.gyms: InMemoryGymRepository = InMemoryGymRepository(clock=clock)
        self.check_ins: InMemoryCheckInRepository = InMemoryCheckInRepository(clock=clock, tz=tz)
        self.committed = False

    async def __aenter__(self) -> InMemoryUnitOfWork:
        self.committed = False
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            await self.commit()

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.committed = False
