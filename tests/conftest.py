from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from sample_app.api import ReadinessCheck, create_app
from sample_app.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(version="v2.3.4", environment="staging")


@pytest.fixture
def make_client(settings: Settings) -> Callable[..., TestClient]:
    def _make(
        app_settings: Optional[Settings] = None,
        readiness_check: Optional[ReadinessCheck] = None,
    ) -> TestClient:
        app = create_app(app_settings or settings, readiness_check=readiness_check)
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
