from tripsplit.services import system_services


class BrokenEngine:
    def connect(self):
        raise ConnectionError("connection refused")


async def test_root(client):
    res = await client.get("/")

    assert res.json() == {"message": "Tripsplit Backend is live"}


async def test_health(client):
    assert (await client.get("/api/v1/system/health")).json() == {"status": "ok"}


async def test_db_health(client):
    body = (await client.get("/api/v1/system/health/db")).json()

    assert body == {"db": True, "message": "Database is connected"}


async def test_db_health_reports_failure(client, monkeypatch):
    monkeypatch.setattr(system_services, "engine", BrokenEngine())

    res = await client.get("/api/v1/system/health/db")

    assert res.status_code == 200
    assert res.json() == {"db": False, "error": "connection refused"}


async def test_metrics(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])
    await add_transaction(event_id, ids["Alice"], 10, [(ids["Bob"], 10)])

    res = await client.get("/api/v1/system/metrics")

    assert res.json() == {"events": 1, "members": 2, "transactions": 1}


async def test_metrics_empty(client):
    assert (await client.get("/api/v1/system/metrics")).json() == {"events": 0, "members": 0, "transactions": 0}
