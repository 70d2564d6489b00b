"""
Common test fixtures and configuration.
"""

from unittest.mock import MagicMock

import pytest

from fly.api.client import FlyClient
from fly.api.fly_auth import FlyCredentials

from .testing.http import ACCESS_TOKEN, API_URL, mock_http
from .testing.settings import default_settings, override_setting


# add imported fixtures to __all__ so they're considered in use in the module
__all__ = ["mock_http", "default_settings", "override_setting"]


@pytest.fixture
def mock_fly_credentials(monkeypatch):
    """Mock load_fly_auth to return fake test credentials."""
    fake_credentials = FlyCredentials(base_url=API_URL, access_token=ACCESS_TOKEN)

    monkeypatch.setattr("fly.api.client.load_fly_auth", lambda settings=None: fake_credentials)
    return fake_credentials


@pytest.fixture
async def fly_client(default_settings):
    """A client for the test API."""
    async with FlyClient(ACCESS_TOKEN, default_settings) as client:
        yield client


@pytest.fixture
def async_time(monkeypatch):
    mock_time = MagicMock(return_value=12345)

    async def mock_sleep(duration):
        mock_time.return_value += duration

    monkeypatch.setattr("asyncio.sleep", mock_sleep)
    monkeypatch.setattr("time.time", mock_time)
    return mock_time
