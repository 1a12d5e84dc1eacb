import os
import tempfile

import pytest

# must be set before tripsplit.core.config is imported
_DB_PATH = os.path.join(tempfile.gettempdir(), f"tripsplit-test-{os.getpid()}.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"

import httpx  # noqa: E402

from tripsplit.main import app  # noqa: E402
from tripsplit.db.session import Base, engine  # noqa: E402
from tripsplit.core.dependencies import AuthUser, get_current_user  # noqa: E402

OWNER_ID = "user-owner"


@pytest.fixture(scope="session", autouse=True)
def remove_test_database():
    yield
    if os.path.exists(_DB_PATH):
        os.remove(_DB_PATH)


@pytest.fixture
def login():
    """Switch the authenticated user for subsequent requests."""
    def _login(user_id: str):
        app.dependency_overrides[get_current_user] = lambda: AuthUser(id=user_id)
    return _login


@pytest.fixture
async def client(login):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    login(OWNER_ID)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def make_event(client):
    """Create an event with the given member names; returns (event_id, {name: member_id})."""
    async def _make(name="Trip", members=()):
        res = await client.post("/api/v1/events/", json={"name": name})
        assert res.status_code == 201, res.text
        event_id = res.json()["event"]["id"]

        ids = {}
        if members:
            res = await client.post(f"/api/v1/events/{event_id}/members", json={"members": list(members)})
            assert res.status_code == 201, res.text
            ids = {m["name"]: m["id"] for m in res.json()["members"]}
        return event_id, ids
    return _make


@pytest.fixture
def add_transaction(client):
    """Post a transaction; splits are (member_id, amount) or (member_id, amount, settled)."""
    def _split(member_id, amount, settled=False):
        return {"memberId": member_id, "amount": amount, "settled": settled}

    async def _add(event_id, paid_by, amount, splits, description="Dinner", **extra):
        body = {
            "description": description,
            "amount": amount,
            "paidById": paid_by,
            "splits": [_split(*s) for s in splits],
            **extra,
        }
        return await client.post(f"/api/v1/events/{event_id}/transactions", json=body)
    return _add
