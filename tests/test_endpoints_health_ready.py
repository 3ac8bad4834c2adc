from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.api.deps import get_health_service
from app.main import create_app
from app.services.health import HealthService


def _client_with_session(session: AsyncMock) -> AsyncClient:
    app = create_app()
    app.dependency_overrides[get_health_service] = lambda: HealthService(session)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_healthz_ok(app_client):
    res = await app_client.get("/healthz")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


@pytest.mark.asyncio
async def test_readyz_ok_when_database_answers():
    async with _client_with_session(AsyncMock()) as client:
        res = await client.get("/readyz")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


@pytest.mark.asyncio
async def test_readyz_503_when_database_is_down():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

    async with _client_with_session(session) as client:
        res = await client.get("/readyz")

    assert res.status_code == 503
    assert res.json() == {"detail": "database unavailable"}
