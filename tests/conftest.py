import pytest

from taarana.app import create_app
from taarana.auth import MemoryIdentityProvider
from taarana.config import Config
from taarana.store import MemoryStore

SIGNUP = {
    "name": "Asha",
    "email": "asha@example.com",
    "phone": "+919800000001",
    "password": "secret123",
    "confirm_password": "secret123",
    "age": 29,
    "gender": "female",
    "health_goals": ["stress_relief"],
    "diseases": ["migraine"],
    "symptoms": ["insomnia"],
}


@pytest.fixture
def identity():
    return MemoryIdentityProvider()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(identity, store):
    return create_app(Config(testing=True), identity=identity, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signup_data():
    return dict(SIGNUP)


@pytest.fixture
def auth_headers(client, signup_data):
    resp = client.post("/api/signup", json=signup_data)
    assert resp.status_code == 201
    resp = client.post("/api/login", json={"email": signup_data["email"], "password": signup_data["password"]})
    token = resp.get_json()["session"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
