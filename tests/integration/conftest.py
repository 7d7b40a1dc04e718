"""Integration test fixtures — real TEI server from TEI_BASE_URL."""

import pytest

from teiclient.client import EmbeddingServiceClient


@pytest.fixture(scope="class")
def live_client():
    """Real HTTP client against TEI_BASE_URL."""
    client = EmbeddingServiceClient.from_env()
    yield client
    client.close()
