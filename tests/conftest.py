import copy

import pytest
from fastapi.testclient import TestClient

from work_api.config import Settings
from work_api.main import create_app
from work_api.models.works import UPDATE_WORKS_EXAMPLE


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="INFO")


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def works_payload() -> dict:
    return copy.deepcopy(UPDATE_WORKS_EXAMPLE)
