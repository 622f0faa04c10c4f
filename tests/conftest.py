"""Test configuration and common fixtures."""

import pytest
import respx
from fastapi.testclient import TestClient

from bridge import create_app
from config import BridgeConfig

UPSTREAM_HOST = "canvas.example.edu"


@pytest.fixture
def bridge_config() -> BridgeConfig:
    """Return the configuration used by the test application."""
    return BridgeConfig(
        institution_name="Example State University",
        upstream_api_host=UPSTREAM_HOST,
        passthrough_enabled=True,
    )


@pytest.fixture
def app(bridge_config):
    return create_app(bridge_config)


@pytest.fixture
def client(app):
    """TestClient that reports redirects instead of following them."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def upstream():
    """Mocked upstream Canvas API."""
    with respx.mock(base_url=f"https://{UPSTREAM_HOST}", assert_all_called=False) as mock:
        yield mock
