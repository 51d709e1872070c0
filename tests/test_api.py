import uuid


def _register(client, name):
    r = client.post("/profiles", json={"name": name})
    assert r.status_code == 201
    return r.json()["id"]


def test_register_and_fetch_profile(client):
    r = client.post("/profiles", json={"name": "Akame"})
    assert r.status_code == 201
    profile = r.json()
    assert profile["name"] == "Akame"

    r = client.get(f"/profiles/{profile['id']}")
    assert r.status_code == 200
    assert r.json() == profile


def test_fetch_unknown_profile(client):
    r = client.get(f"/profiles/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["detail"] == "Profile not found"


def test_fetch_profile_malformed_id(client):
    assert client.get("/profiles/not-a-uuid").status_code == 422


def test_enqueue_unknown_profile(client):
    r = client.post("/queue/enqueue", json={"profile_id": str(uuid.uuid4())})
    assert r.status_code == 400
    assert r.json()["detail"] == "Profile does not exist"


def test_enqueue_then_already_queued(client):
    a = _register(client, "A")

    r = client.post("/queue/enqueue", json={"profile_id": a})
    assert r.status_code == 202
    assert r.json() == {"status": "enqueued", "profile_id": a}

    r = client.post("/queue/enqueue", json={"profile_id": a})
    assert r.status_code == 200
    assert r.json() == {"status": "already_queued", "profile_id": a}

    assert client.get("/queue").json() == [a]


def test_full_match_flow(client):
    a = _register(client, "A")
    b = _register(client, "B")
    c = _register(client, "C")

    assert client.post("/queue/enqueue", json={"profile_id": a}).status_code == 202
    assert client.get("/queue").json() == [a]

    r = client.post("/queue/enqueue", json={"profile_id": b})
    assert r.status_code == 201
    match = r.json()
    assert {match["player1"], match["player2"]} == {a, b}
    assert client.get("/queue").json() == []

    assert client.post("/queue/enqueue", json={"profile_id": c}).status_code == 202
    assert client.get("/queue").json() == [c]

    listed = client.get("/matches").json()
    assert listed == [match]

    r = client.get(f"/matches/{match['id']}")
    assert r.status_code == 200
    assert r.json() == match


def test_fetch_unknown_match(client):
    r = client.get(f"/matches/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["detail"] == "Match not found"


def test_leave_queue(client):
    a = _register(client, "A")
    client.post("/queue/enqueue", json={"profile_id": a})

    r = client.post("/queue/leave", json={"profile_id": a})
    assert r.status_code == 200
    assert r.json() == {"status": "removed", "profile_id": a}
    assert client.get("/queue").json() == []

    r = client.post("/queue/enqueue", json={"profile_id": a})
    assert r.status_code == 202


def test_leave_not_queued(client):
    a = _register(client, "A")
    r = client.post("/queue/leave", json={"profile_id": a})
    assert r.status_code == 400
    assert r.json()["detail"] == "Not in queue"


def test_enqueue_missing_body(client):
    assert client.post("/queue/enqueue", json={}).status_code == 422


def test_operational_endpoints(client):
    assert client.get("/").json() == {"service": "matchmaker", "status": "running"}
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/ping").text == "pong"

    a = _register(client, "A")
    client.post("/queue/enqueue", json={"profile_id": a})
    status = client.get("/status").json()
    assert status["profiles"] == 1
    assert status["queued"] == 1
    assert status["matches"] == 0
    assert status["environment"] == "test"


def test_state_is_per_application(settings):
    from fastapi.testclient import TestClient

    from matchmaker.app import create_app

    with TestClient(create_app(settings)) as first:
        _register(first, "A")
        assert first.get("/status").json()["profiles"] == 1
    with TestClient(create_app(settings)) as second:
        assert second.get("/status").json()["profiles"] == 0


def test_unexpected_queue_error_maps_to_500(client, monkeypatch):
    a = _register(client, "A")

    async def broken(profile_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(client.app.state.match_queue, "join_or_pair", broken)
    r = client.post("/queue/enqueue", json={"profile_id": a})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to join queue"


def test_unexpected_store_error_maps_to_500(client, monkeypatch):
    async def broken(*args):
        raise RuntimeError("boom")

    monkeypatch.setattr(client.app.state.matches, "list_all", broken)
    monkeypatch.setattr(client.app.state.profiles, "get", broken)

    r = client.get("/matches")
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to fetch matches"

    r = client.get(f"/profiles/{uuid.uuid4()}")
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to fetch profile"
