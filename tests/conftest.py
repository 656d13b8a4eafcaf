"""Shared test fixtures."""

import pytest
from aiohttp.test_utils import TestServer

from jobo import JoboClient
from jobo.config import get_settings
from tests.helpers import API_KEY, FakeJobo


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep JOBO_* variables from the host out of the tests."""
    for name in ("JOBO_API_KEY", "JOBO_BASE_URL", "JOBO_TIMEOUT_S", "JOBO_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def fake_api():
    fake = FakeJobo()
    server = TestServer(fake.app)
    await server.start_server()
    fake.base_url = str(server.make_url("/")).rstrip("/")
    yield fake
    await server.close()


@pytest.fixture
async def client(fake_api):
    async with JoboClient(API_KEY, base_url=fake_api.base_url) as c:
        yield c
