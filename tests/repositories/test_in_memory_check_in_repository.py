from __future__ import annotations

import asyncio
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from app.core.clock import FrozenClock
from app.core.exceptions import MaxNumberOfCheckInsError
from app.repositories.in_memory import InMemoryCheckInRepository


@pytest.mark.asyncio
async def test_create_uses_clock_and_calendar_day(clock: FrozenClock):
    repo = InMemoryCheckInRepository(clock=clock)

    check_in = await repo.create(user_id="user-01", gym_id="gym-01")

    assert check_in.id
    assert check_in.created_at == clock.now()
    assert check_in.check_in_date == date(2023, 2, 20)
    assert check_in.validated_at is None


@pytest.mark.asyncio
async def test_find_by_user_id_on_date_matches_calendar_day_not_24h_window():
    repo = InMemoryCheckInRepository()
    await repo.create(
        user_id="user-01", gym_id="gym-01", created_at=datetime(2023, 2, 20, 23, 0, tzinfo=UTC)
    )

    same_day = await repo.find_by_user_id_on_date("user-01", datetime(2023, 2, 20, 0, 1, tzinfo=UTC))
    next_day = await repo.find_by_user_id_on_date("user-01", datetime(2023, 2, 21, 1, 0, tzinfo=UTC))
    other_user = await repo.find_by_user_id_on_date(
        "user-02", datetime(2023, 2, 20, 23, 0, tzinfo=UTC)
    )

    assert same_day is not None
    assert next_day is None
    assert other_user is None


@pytest.mark.asyncio
async def test_calendar_day_uses_configured_timezone():
    repo = InMemoryCheckInRepository(tz=ZoneInfo("America/Sao_Paulo"))
    # 22:00 local on the 20th
    await repo.create(
        user_id="user-01", gym_id="gym-01", created_at=datetime(2023, 2, 21, 1, 0, tzinfo=UTC)
    )

    found = await repo.find_by_user_id_on_date("user-01", datetime(2023, 2, 20, 12, 0, tzinfo=UTC))
    not_found = await repo.find_by_user_id_on_date(
        "user-01", datetime(2023, 2, 21, 12, 0, tzinfo=UTC)
    )

    assert found is not None
    assert found.check_in_date == date(2023, 2, 20)
    assert not_found is None


@pytest.mark.asyncio
async def test_create_rejects_second_check_in_on_same_day():
    repo = InMemoryCheckInRepository()
    moment = datetime(2023, 2, 20, 8, 0, tzinfo=UTC)
    await repo.create(user_id="user-01", gym_id="gym-01", created_at=moment)

    with pytest.raises(MaxNumberOfCheckInsError):
        await repo.create(user_id="user-01", gym_id="gym-02", created_at=moment + timedelta(hours=2))

    assert await repo.count_by_user_id("user-01") == 1


@pytest.mark.asyncio
async def test_concurrent_creates_for_same_user_and_day_keep_one():
    repo = InMemoryCheckInRepository()
    moment = datetime(2023, 2, 20, 8, 0, tzinfo=UTC)

    results = await asyncio.gather(
        *(repo.create(user_id="user-01", gym_id="gym-01", created_at=moment) for _ in range(5)),
        return_exceptions=True,
    )

    errors = [r for r in results if isinstance(r, MaxNumberOfCheckInsError)]
    assert len(errors) == 4
    assert await repo.count_by_user_id("user-01") == 1


@pytest.mark.asyncio
async def test_find_many_by_user_id_pages_by_twenty_in_chronological_order():
    repo = InMemoryCheckInRepository()
    start = datetime(2023, 1, 1, 8, 0, tzinfo=UTC)
    for day in range(22):
        await repo.create(user_id="user-01", gym_id="gym-01", created_at=start + timedelta(days=day))
    await repo.create(user_id="user-02", gym_id="gym-01", created_at=start)

    first = await repo.find_many_by_user_id("user-01", 1)
    second = await repo.find_many_by_user_id("user-01", 2)

    assert len(first) == 20
    assert first[0].created_at == start
    assert [c.created_at for c in second] == [
        start + timedelta(days=20),
        start + timedelta(days=21),
    ]
    assert await repo.count_by_user_id("user-01") == 22


@pytest.mark.asyncio
async def test_save_replaces_stored_check_in():
    repo = InMemoryCheckInRepository()
    check_in = await repo.create(user_id="user-01", gym_id="gym-01")
    validated_at = datetime(2023, 2, 20, 8, 5, tzinfo=UTC)

    check_in.validated_at = validated_at
    await repo.save(check_in)

    stored = await repo.find_by_id(check_in.id)
    assert stored is not None
    assert stored.validated_at == validated_at
