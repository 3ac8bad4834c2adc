"""API dependency helpers and service providers."""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, SystemClock
from app.core.config import get_settings
from app.db import SessionLocal, get_async_session
from app.infra.unit_of_work import SqlAlchemyUnitOfWork, UnitOfWork
from app.services.check_in import CheckInService
from app.services.check_in_history import CheckInHistoryService
from app.services.gym_create import GymCreateService
from app.services.gym_nearby import GymNearbyService
from app.services.gym_search import GymSearchService
from app.services.health import HealthService
from app.utils.datetime import resolve_timezone

__all__ = [
    "get_async_session",
    "get_clock",
    "get_uow_factory",
    "get_check_in_service",
    "get_check_in_history_service",
    "get_gym_create_service",
    "get_gym_search_service",
    "get_gym_nearby_service",
    "get_health_service",
]

UnitOfWorkFactory = Callable[[], UnitOfWork]

_system_clock = SystemClock()


def get_clock() -> Clock:
    return _system_clock


# --- Service providers for DI ---


def get_uow_factory(clock: Clock = Depends(get_clock)) -> UnitOfWorkFactory:
    tz = resolve_timezone(get_settings().check_in_timezone)

    def _uow_factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(SessionLocal, clock=clock, tz=tz)

    return _uow_factory


def get_check_in_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    clock: Clock = Depends(get_clock),
) -> CheckInService:
    return CheckInService(uow_factory, clock=clock)


def get_check_in_history_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> CheckInHistoryService:
    return CheckInHistoryService(uow_factory)


def get_gym_create_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> GymCreateService:
    return GymCreateService(uow_factory)


def get_gym_search_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> GymSearchService:
    return GymSearchService(uow_factory)


def get_gym_nearby_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> GymNearbyService:
    return GymNearbyService(uow_factory)


def get_health_service(
    session: AsyncSession = Depends(get_async_session),
) -> HealthService:
    return HealthService(session)
