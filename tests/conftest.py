import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def histogram():
    return {"0": 10, "1": 20, "2": 30, "3": 40, "4": 50, "5": 60}
