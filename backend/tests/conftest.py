import asyncio

import httpx
import pytest
from httpx import ASGITransport

from inkwell.config import Settings
from inkwell.core.events import PasswordResetRequestedEvent
from inkwell.main import create_app


class CompatibleTestClient:
    """Synchronous test client driving the ASGI app through httpx's ASGITransport"""

    def __init__(self, app):
        self.app = app
        self.transport = ASGITransport(app=app)
        self.base_url = "http://testserver"
        self._loop = asyncio.new_event_loop()

    def request(self, method, url, **kwargs):
        async def _request():
            async with httpx.AsyncClient(transport=self.transport, base_url=self.base_url) as client:
                return await client.request(method, url, **kwargs)
        return self._loop.run_until_complete(_request())

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self.request("POST", url, **kwargs)

    def put(self, url, **kwargs):
        return self.request("PUT", url, **kwargs)

    def delete(self, url, **kwargs):
        return self.request("DELETE", url, **kwargs)

    def close(self):
        self._loop.close()


TestClient = CompatibleTestClient

TEST_PASSWORD = "testpassword123"


@pytest.fixture
def settings():
    """Settings for an isolated in-memory database"""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        jwt_secret_key="test-secret-key",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    """Create a fresh application (and database) per test"""
    app = create_app(settings)
    yield app
    app.state.database.dispose()


@pytest.fixture
def db(app):
    """Create a session on the application's database"""
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(app):
    """Create a test client"""
    test_client = TestClient(app)
    yield test_client
    test_client.close()


@pytest.fixture
def reset_events(app):
    """Collect PasswordResetRequestedEvents published by the app"""
    events = []
    app.state.event_bus.subscribe(PasswordResetRequestedEvent, events.append)
    return events


def register_user(client, email, first_name="Test", last_name="User", password=TEST_PASSWORD):
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "firstName": first_name, "lastName": last_name}
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


class Account:
    """A registered user and the headers to act as them"""

    def __init__(self, payload):
        self.user = payload["user"]
        self.id = payload["user"]["id"]
        self.email = payload["user"]["email"]
        self.token = payload["token"]
        self.headers = auth_headers(payload["token"])


@pytest.fixture
def alice(client):
    return Account(register_user(client, "alice@example.com", "Alice", "Archer"))


@pytest.fixture
def bob(client):
    return Account(register_user(client, "bob@example.com", "Bob", "Baker"))


@pytest.fixture
def carol(client):
    return Account(register_user(client, "carol@example.com", "Carol", "Cooper"))


def create_document(client, account, title="Hi", content="Hello world", is_public=False):
    response = client.post(
        "/api/documents",
        json={"title": title, "content": content, "isPublic": is_public},
        headers=account.headers
    )
    assert response.status_code == 201, response.text
    return response.json()


def share_document(client, owner, document_id, grantee, permission):
    response = client.post(
        f"/api/documents/{document_id}/share",
        json={"userEmail": grantee.email, "permission": permission},
        headers=owner.headers
    )
    assert response.status_code == 200, response.text
    return response.json()
