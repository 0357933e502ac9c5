import pytest
from fastapi.testclient import TestClient
from grimoire.config import Settings
from grimoire.main import create_app

OWNER_OPEN_ID = "owner-1"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret",
        OWNER_OPEN_ID=OWNER_OPEN_ID,
        DEV_LOGIN_ENABLED=True,
        UPLOAD_DIR=str(tmp_path / "uploads"),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


def sign_in(client, settings, open_id, **extra):
    r = client.post("/api/auth/dev-login", json={"openId": open_id, **extra})
    assert r.status_code == 200
    token = r.cookies[settings.COOKIE_NAME]
    # Each caller carries its own bearer token instead of sharing the cookie jar
    client.cookies.clear()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(client, settings):
    return sign_in(client, settings, OWNER_OPEN_ID, name="Owner")


@pytest.fixture
def player(client, settings):
    return sign_in(client, settings, "player-1", name="Player")
