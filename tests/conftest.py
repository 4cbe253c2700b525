import pytest
from fastapi.testclient import TestClient

from finguru.api.app import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
