import pytest

from src.servers.github.main import create_server
from tests.clients.FakeGitHubClient import FakeGitHubClient
from tests.clients.LocalMCPTestClient import LocalMCPTestClient


# Set asyncio default fixture loop scope to function
def pytest_configure(config):
    config.option.asyncio_default_fixture_loop_scope = "function"


@pytest.fixture
def github_client():
    """Fake remote client recording every GitHub call"""
    return FakeGitHubClient()


@pytest.fixture
def client(github_client):
    """Unconnected MCP test client; enter it with `async with` in the test"""
    return LocalMCPTestClient(create_server(github_client=github_client))
