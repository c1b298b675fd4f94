import pytest

from ledger_backend import create_app
from ledger_backend.config import Settings
from ledger_backend.db import Store


def make_settings(tmp_path, **overrides):
    values = dict(
        jwt_secret_key="test-secret-key-that-is-at-least-32-bytes",
        db_path=str(tmp_path / "ledger.db"),
        password_hash_method="pbkdf2:sha256:1000",
        testing=True,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def store(settings):
    store = Store(settings.db_path)
    yield store
    store.close()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(username="alice", name="Alice", password="s3cret"):
        return client.post("/users/", json={"username": username, "name": name, "password": password})
    return _register


@pytest.fixture
def token(client, register):
    register()
    resp = client.post("/login", json={"username": "alice", "password": "s3cret"})
    return resp.get_json()["jwtToken"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_tx():
    return {
        "type": "expense",
        "category": "Groceries",
        "amount": 42.5,
        "date": "2024-03-01",
        "description": "weekly shop",
    }
