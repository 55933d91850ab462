from datetime import timedelta

from dateutil.parser import isoparse
from starlette.testclient import TestClient

from posts_gateway.utils.dtime import now_aware


async def test_health(api_client: TestClient) -> None:
    before = now_aware()
    resp = api_client.get("/api/health")
    after = now_aware()

    assert resp.status_code == 200

    resp_json = resp.json()
    assert resp_json.keys() == {"success", "message", "timestamp", "uptime"}
    assert resp_json["success"] is True
    assert resp_json["message"] == "Server is running"
    assert before - timedelta(seconds=1) <= isoparse(resp_json["timestamp"]) <= after
    assert resp_json["uptime"] >= 0


async def test_health_uptime_never_decreases(api_client: TestClient) -> None:
    uptimes = [api_client.get("/api/health").json()["uptime"] for _ in range(5)]

    assert uptimes == sorted(uptimes)


async def test_health_does_not_touch_data_store(api_client: TestClient) -> None:
    # no backend is configured for the unit tests, so any storage access would fail
    resp = api_client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["success"] is True
