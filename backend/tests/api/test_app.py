"""Application wiring — health check, envelopes and server resilience.

Invariants:
    - GET /health returns 200 with service metadata
    - Malformed JSON body → 400 coarse envelope, never a 500
    - The app keeps serving after a failed request
    - Routing errors (404, 405) use the failure envelope
"""


async def test_health_check(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_malformed_json_body(client):
    res = await client.post(
        "/send/sol", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Missing required fields"}


async def test_empty_body_on_instruction_route(client):
    res = await client.post("/token/mint", json={})
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_service_survives_failed_request(client):
    bad = await client.post("/message/verify", json={
        "message": "hi", "signature": "AA==", "pubkey": "bad",
    })
    assert bad.status_code == 400
    good = await client.post("/keypair")
    assert good.status_code == 200
    assert good.json()["success"] is True


async def test_wrong_method_uses_envelope(client):
    res = await client.get("/keypair")
    assert res.status_code == 405
    assert res.json() == {"success": False, "error": "Method Not Allowed"}
    assert "POST" in res.headers["allow"]


async def test_unknown_route_uses_envelope(client):
    res = await client.post("/no/such/route", json={})
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Not Found"}
