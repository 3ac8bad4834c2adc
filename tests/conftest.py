# tests/conftest.py
import os
from datetime import UTC, datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# アプリ import 前に環境を固定（DB には接続しない）
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_FORMAT", "json")
os.environ.setdefault("SENTRY_DSN", "")

from app.api.deps import get_clock, get_uow_factory  # noqa: E402
from app.core.clock import FrozenClock  # noqa: E402
from app.infra.unit_of_work import InMemoryUnitOfWork  # noqa: E402
from app.main import create_app  # noqa: E402
from tests.factories.gyms import make_gym  # noqa: E402


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2023, 2, 20, 8, 0, 0, tzinfo=UTC))


@pytest.fixture
def uow(clock: FrozenClock) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(clock=clock)


@pytest.fixture
def seeded_uow(uow: InMemoryUnitOfWork) -> InMemoryUnitOfWork:
    uow.gyms.gyms.append(make_gym("gym-01", title="Python Gym"))
    return uow


@pytest_asyncio.fixture
async def app_client(clock: FrozenClock, seeded_uow: InMemoryUnitOfWork):
    app = create_app()
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_uow_factory] = lambda: (lambda: seeded_uow)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
