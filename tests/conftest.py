import pytest
from fastapi.testclient import TestClient

from todo_app.db.store import TodoStore
from todo_app.main import create_app


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
