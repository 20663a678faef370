import pytest
from fastapi.testclient import TestClient

from warikan.core.config import Settings
from warikan.main import create_app


def _test_settings(**overrides):
    values = {"DATABASE_URL": "sqlite+aiosqlite://", "DB_CONNECT_RETRIES": 1}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_client():
    """Factory for clients bound to their own in-memory database."""
    clients = []

    def _make(**overrides):
        client = TestClient(create_app(_test_settings(**overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
