from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app.core.clock import FrozenClock
from app.core.exceptions import (
    LateCheckInValidationError,
    MaxDistanceError,
    MaxNumberOfCheckInsError,
    ResourceNotFoundError,
)
from app.infra.unit_of_work import InMemoryUnitOfWork
from app.services.check_in import CheckInRequest, CheckInService
from tests.factories.gyms import (
    DISTANT_LATITUDE,
    DISTANT_LONGITUDE,
    GYM_LATITUDE,
    GYM_LONGITUDE,
    make_gym,
)


def _request(gym_id: str = "gym-01", user_id: str = "user-01", **coords) -> CheckInRequest:
    return CheckInRequest(
        user_id=user_id,
        gym_id=gym_id,
        user_latitude=coords.get("latitude", GYM_LATITUDE),
        user_longitude=coords.get("longitude", GYM_LONGITUDE),
    )


@pytest.fixture
def service(seeded_uow: InMemoryUnitOfWork, clock: FrozenClock) -> CheckInService:
    return CheckInService(lambda: seeded_uow, clock=clock)


@pytest.mark.asyncio
async def test_check_in_at_gym_coordinates(service: CheckInService, seeded_uow):
    check_in = await service.check_in(_request())

    assert isinstance(check_in.id, str) and check_in.id
    assert check_in.gym_id == "gym-01"
    assert check_in.user_id == "user-01"
    assert check_in.validated_at is None
    assert seeded_uow.committed is True


@pytest.mark.asyncio
async def test_cannot_check_in_twice_on_the_same_day(service: CheckInService, clock: FrozenClock):
    clock.set(datetime(2023, 2, 20, 8, 0, 0, tzinfo=UTC))
    await service.check_in(_request())

    clock.set(datetime(2023, 2, 20, 10, 0, 0, tzinfo=UTC))
    with pytest.raises(MaxNumberOfCheckInsError):
        await service.check_in(_request())


@pytest.mark.asyncio
async def test_daily_limit_applies_across_gyms(
    service: CheckInService, seeded_uow: InMemoryUnitOfWork
):
    seeded_uow.gyms.gyms.append(make_gym("gym-02", title="Second Gym"))
    await service.check_in(_request("gym-01"))

    with pytest.raises(MaxNumberOfCheckInsError):
        await service.check_in(_request("gym-02"))


@pytest.mark.asyncio
async def test_can_check_in_on_different_days(service: CheckInService, clock: FrozenClock):
    clock.set(datetime(2023, 2, 20, 8, 0, 0, tzinfo=UTC))
    await service.check_in(_request())

    clock.set(datetime(2023, 2, 21, 8, 0, 0, tzinfo=UTC))
    check_in = await service.check_in(_request())

    assert check_in.id


@pytest.mark.asyncio
async def test_calendar_day_not_24h_window(service: CheckInService, clock: FrozenClock):
    clock.set(datetime(2023, 2, 20, 23, 50, tzinfo=UTC))
    await service.check_in(_request())

    clock.advance(timedelta(minutes=20))
    check_in = await service.check_in(_request())

    assert check_in.created_at == datetime(2023, 2, 21, 0, 10, tzinfo=UTC)


@pytest.mark.asyncio
async def test_cannot_check_in_on_distant_gym(
    service: CheckInService, seeded_uow: InMemoryUnitOfWork
):
    seeded_uow.gyms.gyms.append(
        make_gym("gym-02", latitude=DISTANT_LATITUDE, longitude=DISTANT_LONGITUDE)
    )

    with pytest.raises(MaxDistanceError):
        await service.check_in(_request("gym-02"))

    assert seeded_uow.check_ins.check_ins == []


@pytest.mark.asyncio
async def test_missing_gym_is_resource_not_found(
    service: CheckInService, seeded_uow: InMemoryUnitOfWork
):
    with pytest.raises(ResourceNotFoundError):
        await service.check_in(_request("missing-gym"))

    assert seeded_uow.check_ins.check_ins == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("distance_km", "allowed"),
    [(0.0, True), (0.0999, True), (0.1, True), (0.1001, False), (4.8, False)],
)
async def test_distance_boundary_is_strictly_greater_than_100_m(
    monkeypatch, service: CheckInService, distance_km: float, allowed: bool
):
    monkeypatch.setattr("app.services.check_in.distance_between", lambda a, b: distance_km)

    if allowed:
        assert (await service.check_in(_request())).id
    else:
        with pytest.raises(MaxDistanceError):
            await service.check_in(_request())


@pytest.mark.asyncio
async def test_user_about_90_m_away_can_check_in(service: CheckInService):
    # 0.0008 degrees of latitude is roughly 89 m
    check_in = await service.check_in(_request(latitude=GYM_LATITUDE + 0.0008))

    assert check_in.id


@pytest.mark.asyncio
async def test_user_about_111_m_away_cannot_check_in(service: CheckInService):
    with pytest.raises(MaxDistanceError):
        await service.check_in(_request(latitude=GYM_LATITUDE + 0.001))


@pytest.mark.asyncio
async def test_validate_check_in_within_twenty_minutes(service: CheckInService, clock):
    created = await service.check_in(_request())

    clock.advance(timedelta(minutes=20))
    validated = await service.validate(created.id)

    assert validated.validated_at == clock.now()


@pytest.mark.asyncio
async def test_validate_check_in_after_twenty_minutes_fails(service: CheckInService, clock):
    created = await service.check_in(_request())

    clock.advance(timedelta(minutes=21))
    with pytest.raises(LateCheckInValidationError):
        await service.validate(created.id)

    assert created.validated_at is None


@pytest.mark.asyncio
async def test_validate_missing_check_in(service: CheckInService):
    with pytest.raises(ResourceNotFoundError):
        await service.validate("missing")
