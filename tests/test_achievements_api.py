from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import async_session_context, get_async_db_session
from app.main import app
from factories import EXPLORER_ADDR, completion, explorer_achievement, explorer_category

client = TestClient(app)


def _async_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def mock_session():
    session = AsyncMock(spec=AsyncSession)

    async def fake_session():
        yield session

    app.dependency_overrides[get_async_db_session] = fake_session
    yield session
    app.dependency_overrides.clear()


@pytest.mark.parametrize("addr", ["0", "0x0", "0x000"])
def test_zero_address_returns_message(addr, mock_session):
    res = client.get("/v1/achievements/fetch", params={"addr": addr})

    assert res.status_code == 400
    assert res.json() == {"message": "Please connect your wallet first"}
    mock_session.execute.assert_not_called()


def test_missing_address_is_422():
    res = client.get("/v1/achievements/fetch")
    assert res.status_code == 422


@pytest.mark.parametrize("addr", ["not-a-wallet", "0xzz", "-5", "2_748", "+2748", "0X"])
def test_malformed_address_is_422(addr):
    res = client.get("/v1/achievements/fetch", params={"addr": addr})

    assert res.status_code == 422
    assert res.json()["detail"][0]["loc"][:2] == ["query", "addr"]


@pytest.mark.parametrize(
    "failure, detail",
    [
        (ConnectionRefusedError(111, "Connect call failed"), "Connect call failed"),
        (OperationalError("SELECT", {}, Exception("server closed the connection")), "server closed the connection"),
    ],
)
def test_store_failure_returns_message(failure, detail, mock_session):
    mock_session.execute.side_effect = failure

    res = client.get("/v1/achievements/fetch", params={"addr": EXPLORER_ADDR})

    assert res.status_code == 500
    body = res.json()
    assert set(body) == {"message"}
    assert body["message"].startswith("Error fetching user achievements: ")
    assert detail in body["message"]
    mock_session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_returns_grouped_progress(db):
    async with async_session_context() as session:
        session.add_all([explorer_category(), explorer_achievement()])

    async with _async_client() as ac:
        res = await ac.get("/v1/achievements/fetch", params={"addr": EXPLORER_ADDR})

    assert res.status_code == 200
    assert res.json() == [{
        "category_name": "Explorer",
        "category_desc": "Explore the world",
        "achievements": [{
            "name": "Wanderer",
            "short_desc": "Visit 5 places",
            "title": "Not yet",
            "desc": "Keep exploring",
            "completed": False,
            "verify_type": "count",
        }],
    }]

    async with async_session_context() as session:
        session.add(completion())

    async with _async_client() as ac:
        res = await ac.get("/v1/achievements/fetch", params={"addr": "2748"})

    achievement = res.json()[0]["achievements"][0]
    assert achievement["completed"] is True
    assert (achievement["title"], achievement["desc"]) == ("Done!", "You explored!")


@pytest.mark.asyncio
async def test_fetch_empty_store(db):
    async with _async_client() as ac:
        res = await ac.get("/v1/achievements/fetch", params={"addr": EXPLORER_ADDR})

    assert res.status_code == 200
    assert res.json() == []


def test_store_failure_logged_once(mock_session, caplog):
    mock_session.execute.side_effect = ConnectionRefusedError(111, "Connect call failed")

    with caplog.at_level("ERROR"):
        res = client.get("/v1/achievements/fetch", params={"addr": EXPLORER_ADDR})

    assert res.status_code == 500
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert [r.name for r in errors] == ["app.core.achievements.service"]
