"""
Shared test fixtures.
"""

import pytest
from unittest.mock import Mock, MagicMock

from weaviate_console.core.config import Settings
from weaviate_console.db.core.client import WeaviateClient


@pytest.fixture
def settings(tmp_path):
    """Settings independent of the environment and any .env file."""
    return Settings(
        _env_file=None,
        weaviate_url="http://localhost:8080",
        log_dir=tmp_path / "logs"
    )


@pytest.fixture
def mock_weaviate_client():
    """Create a mock client handle whose managed connection yields a mock typed client."""
    client = Mock(spec=WeaviateClient)
    client.url = "http://localhost:8080"

    # Mock the managed_connection context manager
    mock_connection = MagicMock()
    mock_weaviate_instance = MagicMock()
    mock_connection.__enter__ = MagicMock(return_value=mock_weaviate_instance)
    mock_connection.__exit__ = MagicMock(return_value=False)
    client.managed_connection = MagicMock(return_value=mock_connection)

    # Mock collections
    mock_collection = MagicMock()
    mock_weaviate_instance.client.collections.get = MagicMock(return_value=mock_collection)
    mock_weaviate_instance.client.collections.exists = MagicMock(return_value=True)

    client.typed = mock_weaviate_instance.client
    client.collection = mock_collection
    return client
