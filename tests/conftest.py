import pytest
from fastapi.testclient import TestClient
from fake_supabase import FakeSupabase

ME = "user-me"
TEAMMATE = "user-alice"
LONER = "user-loner"
GROUP = "group-1"

TOKENS = {
    "token-me": ME,
    "token-alice": TEAMMATE,
    "token-loner": LONER,
}


@pytest.fixture()
def fake_supabase():
    fake = FakeSupabase(tokens=TOKENS)
    fake.tables["group_members"] = [
        {"id": 1, "group_id": GROUP, "user_id": ME},
        {"id": 2, "group_id": GROUP, "user_id": TEAMMATE},
    ]
    fake.tables["profiles"] = [
        {"id": 10, "user_id": ME, "display_name": "Morgan"},
        {"id": 11, "user_id": TEAMMATE, "display_name": "Alice"},
        {"id": 12, "user_id": LONER, "display_name": "Lonely"},
    ]
    fake.tables["habits"] = []
    return fake


@pytest.fixture()
def gateway(fake_supabase):
    from habitboard.modules.habits.service import HabitTaskGateway
    return HabitTaskGateway(fake_supabase, "token-me", avatar_url="https://avatar.test/default.svg")


@pytest.fixture()
def make_gateway(fake_supabase):
    from habitboard.modules.habits.service import HabitTaskGateway

    def _make(token):
        return HabitTaskGateway(fake_supabase, token, avatar_url="https://avatar.test/default.svg")
    return _make


@pytest.fixture()
def client(fake_supabase):
    from habitboard.main import app, limiter
    from habitboard.database.supabase_client import get_supabase
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    limiter.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.reset()
