from typing import Generator

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def test_app():
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as test_client:
        yield test_client
