import pytest
from limits import parse
from habitboard.config.settings import settings


ME_HEADERS = {"Authorization": "Bearer token-me"}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}
    assert r.headers["X-Frame-Options"] == "DENY"


def test_add_and_list_habits(client):
    r = client.post("/api/v1/habits", json={"name": "Drink water"}, headers=ME_HEADERS)
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    task_id = body["id"]

    r = client.get("/api/v1/habits", headers=ME_HEADERS)
    assert r.status_code == 200
    members = r.json()["members"]
    me = next(m for m in members if m["id"] == "user-me")
    assert me["name"] == "You"
    assert me["lastCheckin"] == ""
    assert me["tasks"] == [{"id": task_id, "title": "Drink water", "completed": False}]


def test_complete_and_delete_habit(client, fake_supabase):
    task_id = client.post("/api/v1/habits", json={"name": "Walk"}, headers=ME_HEADERS).json()["id"]

    r = client.post(f"/api/v1/habits/{task_id}/complete", headers=ME_HEADERS)
    assert r.status_code == 200
    assert r.json() == {"success": True, "error": None}
    assert fake_supabase.tables["habits"][0]["completed"] is True

    r = client.delete(f"/api/v1/habits/{task_id}", headers=ME_HEADERS)
    assert r.status_code == 200
    assert fake_supabase.tables["habits"] == []


def test_missing_token_is_auth_error(client):
    r = client.get("/api/v1/habits")
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "AUTH_ERROR"

    r = client.post("/api/v1/habits", json={"name": "x"})
    assert r.status_code == 401
    assert r.json()["success"] is False


def test_user_without_group_gets_not_found(client):
    r = client.get("/api/v1/habits", headers={"Authorization": "Bearer token-loner"})
    assert r.status_code == 404
    assert r.json()["error"] == {"kind": "group", "code": "NO_GROUP", "message": "No group found for user"}


def test_backend_failure_maps_to_bad_gateway(client):
    r = client.delete("/api/v1/habits/not-a-number", headers=ME_HEADERS)
    assert r.status_code == 502
    assert r.json()["error"]["code"] == "TASK_DELETE_ERROR"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_trimmed_not_rejected(client, fake_supabase, name):
    r = client.post("/api/v1/habits", json={"name": name}, headers=ME_HEADERS)
    assert r.status_code == 201
    assert r.json()["success"] is True
    assert fake_supabase.tables["habits"][0]["name"] == ""


def test_rate_limit_applies_to_api_routes_but_not_health(client):
    allowed = parse(settings.rate_limit).amount
    statuses = [client.get("/api/v1/habits", headers=ME_HEADERS).status_code for _ in range(allowed + 1)]
    assert statuses[:allowed] == [200] * allowed
    assert statuses[-1] == 429

    assert all(client.get("/health").status_code == 200 for _ in range(allowed + 1))


def test_error_codes_are_closed_in_openapi(client):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]
    assert "NO_GROUP" in schemas["GroupErrorCode"]["enum"]
    assert "AUTH_ERROR" in schemas["HabitErrorCode"]["enum"]


def test_group_profiles_route(client):
    r = client.get("/api/v1/groups/me/profiles", headers=ME_HEADERS)
    assert r.status_code == 200
    names = [p["display_name"] for p in r.json()["profiles"]]
    assert names == ["Morgan", "Alice"]
