"""
Shared fixtures: in-memory database, fake YouTube resource, test client
"""
import pytest
from fastapi.testclient import TestClient

from ytclone.core.youtube_client import YouTubeClient
from ytclone.db.session import Database
from ytclone.main import create_app

from tests.fakes import FakeYouTubeService


@pytest.fixture
def fake_youtube():
    return FakeYouTubeService()


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def app(database, fake_youtube):
    return create_app(
        database=database,
        youtube_client=YouTubeClient(api_key="test-key", service=fake_youtube),
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user through the API and return (token, user)"""
    def _register(username="alice", email="alice@example.com", password="s3cret"):
        response = client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        data = response.json()
        return data["token"], data["user"]
    return _register


@pytest.fixture
def auth_headers(register):
    token, _ = register()
    return {"Authorization": f"Bearer {token}"}
