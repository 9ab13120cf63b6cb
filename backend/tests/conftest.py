import os

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_insight_transport
from app.config.settings import get_settings
from app.core.container import set_container
from app.main import create_app
from tests.mocks.fake_insight_transport import UPSTREAM_URL, FakeInsightTransport


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    os.environ["UPSTREAM_BASE_URL"] = UPSTREAM_URL
    get_settings.cache_clear()


@pytest.fixture
def transport() -> FakeInsightTransport:
    return FakeInsightTransport()


@pytest.fixture
def client(transport: FakeInsightTransport) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_insight_transport] = lambda: transport
    return TestClient(app)


@pytest.fixture
def reset_container():
    yield
    set_container(None)
