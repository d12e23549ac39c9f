"""
Tests for WeaviateClient.
"""

import pytest
from unittest.mock import MagicMock, patch

from weaviate_console.db.core.client import WeaviateClient, ManagedConnection
from weaviate_console.db.core.config import ConnectionConfig, TimeoutConfig
from weaviate_console.db.core.exceptions import ConnectivityError

CONNECT = 'weaviate_console.db.core.client.weaviate.connect_to_custom'


class TestWeaviateClient:
    """Test WeaviateClient class."""

    def test_initialization_from_url(self):
        """Test the handle derives its connection from the URL."""
        with patch(CONNECT) as mock_connect:
            mock_connect.return_value = MagicMock()

            client = WeaviateClient("https://cluster.example.com")

            assert client.url == "https://cluster.example.com"
            assert client.connection.host == "cluster.example.com"
            assert client.connection.secure is True
            kwargs = mock_connect.call_args.kwargs
            assert kwargs["http_host"] == "cluster.example.com"
            assert kwargs["http_port"] == 443
            assert kwargs["http_secure"] is True
            assert kwargs["grpc_secure"] is True
            assert kwargs["auth_credentials"] is None

    def test_initialization_with_custom_config(self):
        """Test client initialization with custom configs."""
        connection = ConnectionConfig(host="custom-host", port=7777, grpc_port=50052, api_key="key")
        timeouts = TimeoutConfig(query=120)

        with patch(CONNECT) as mock_connect:
            mock_connect.return_value = MagicMock()

            client = WeaviateClient("http://custom-host:7777", connection=connection, timeouts=timeouts)

            assert client.connection.port == 7777
            assert client.timeouts.query == 120
            kwargs = mock_connect.call_args.kwargs
            assert kwargs["grpc_port"] == 50052
            assert kwargs["auth_credentials"] is not None

    def test_creation_failure_raises_connectivity_error(self):
        with patch(CONNECT, side_effect=RuntimeError("grpc unavailable")):
            with pytest.raises(ConnectivityError, match="grpc unavailable"):
                WeaviateClient("http://localhost:8080")

    def test_close(self):
        with patch(CONNECT) as mock_connect:
            mock_client = MagicMock()
            mock_connect.return_value = mock_client

            WeaviateClient("http://localhost:8080").close()

            mock_client.close.assert_called_once()


class TestManagedConnection:
    """Test ManagedConnection context manager."""

    def test_reconnects_when_disconnected(self):
        with patch(CONNECT) as mock_connect:
            mock_client = MagicMock()
            mock_client.is_connected.return_value = False
            mock_connect.return_value = mock_client
            handle = WeaviateClient("http://localhost:8080")

            with handle.managed_connection() as conn:
                assert conn is handle

            mock_client.connect.assert_called_once()
            mock_client.close.assert_not_called()

    def test_does_not_reconnect_when_connected(self):
        with patch(CONNECT) as mock_connect:
            mock_client = MagicMock()
            mock_client.is_connected.return_value = True
            mock_connect.return_value = mock_client
            handle = WeaviateClient("http://localhost:8080")

            with ManagedConnection(handle) as conn:
                assert conn.client is mock_client

            mock_client.connect.assert_not_called()

    def test_failed_reconnect_raises_connectivity_error(self):
        with patch(CONNECT) as mock_connect:
            mock_client = MagicMock()
            mock_client.is_connected.return_value = False
            mock_client.connect.side_effect = RuntimeError("refused")
            mock_connect.return_value = mock_client
            handle = WeaviateClient("http://localhost:8080")

            with pytest.raises(ConnectivityError, match="refused"):
                with handle.managed_connection():
                    pass
