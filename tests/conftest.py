"""
Shared pytest fixtures: a fresh receipt store and a FastAPI TestClient bound to it.
"""
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import ReceiptStore, get_store


@pytest.fixture()
def store():
    return ReceiptStore()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
