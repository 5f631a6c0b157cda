import pytest
from fastapi.testclient import TestClient

from vidshare.core.config import Settings
from vidshare.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        FRONTEND_DIR=str(tmp_path / "frontend"),
        MAX_UPLOAD_SIZE_MB=1,
        UPLOAD_CHUNK_SIZE=64 * 1024,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def signup(client, email="alice@x.com", password="pw123", role="creator"):
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "role": role},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return body["token"], body["user"]


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def upload_video(client, token, title="Intro", content=b"\x00\x00\x00\x18ftypmp42",
                 content_type="video/mp4", filename="intro.mp4", **fields):
    data = {"title": title, **fields}
    return client.post(
        "/api/videos",
        data=data,
        files={"video": (filename, content, content_type)},
        headers=auth_headers(token),
    )


@pytest.fixture
def alice(client):
    token, user = signup(client, "alice@x.com", "pw123", "creator")
    return {"token": token, "user": user, "headers": auth_headers(token)}


@pytest.fixture
def bob(client):
    token, user = signup(client, "bob@x.com", "hunter2", "consumer")
    return {"token": token, "user": user, "headers": auth_headers(token)}


@pytest.fixture
def video(client, alice):
    response = upload_video(client, alice["token"])
    assert response.status_code == 201, response.text
    return response.json()["video"]
