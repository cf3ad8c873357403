"""Health check — `SELECT 1` no banco."""

import re

from sqlalchemy.exc import OperationalError

from app.api.deps import get_db
from app.main import start_server


class BrokenSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    async def rollback(self):
        pass


async def test_health_ok(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", body["timestamp"])


async def test_health_reports_database_failure(client):
    async def broken_db():
        yield BrokenSession()

    start_server.dependency_overrides[get_db] = broken_db
    res = await client.get("/health")
    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": "connection refused"}
