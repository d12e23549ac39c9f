import logging
from typing import Optional

import weaviate
from weaviate.auth import AuthApiKey
from weaviate.client import WeaviateClient as OriginalWeaviateClient
from weaviate.config import AdditionalConfig, Timeout

from .config import ConnectionConfig, TimeoutConfig
from .exceptions import ConnectivityError

logger = logging.getLogger(__name__)


class WeaviateClient:
    """
    Client handle bound to exactly one Weaviate endpoint URL.

    Wraps the typed weaviate-client connection together with the URL it was
    built for, so callers can tell whether the handle still matches the
    active connection.

    Example:
        handle = WeaviateClient(
            "http://localhost:8080",
            connection=ConnectionConfig.from_url("http://localhost:8080"),
        )
        with handle.managed_connection() as conn:
            conn.client.collections.list_all()
    """

    def __init__(
        self,
        url: str,
        connection: Optional[ConnectionConfig] = None,
        timeouts: Optional[TimeoutConfig] = None
    ):
        """
        Build the underlying client.

        Args:
            url: Normalized endpoint URL this handle is bound to
            connection: Connection configuration (default: derived from url)
            timeouts: Timeout configuration (default: standard timeouts)

        Raises:
            ConnectivityError: If the client cannot be created
        """
        self.url = url
        self.connection = connection or ConnectionConfig.from_url(url)
        self.timeouts = timeouts or TimeoutConfig()

        self.client = self._create_client()

        logger.info(
            f"WeaviateClient initialized: {self.connection.host}:{self.connection.port} "
            f"(grpc={self.connection.grpc_port}, secure={self.connection.secure})"
        )

    def _create_client(self) -> OriginalWeaviateClient:
        """
        Create underlying Weaviate client instance.

        Returns:
            Connected Weaviate client

        Raises:
            ConnectivityError: If client creation fails
        """
        try:
            client = weaviate.connect_to_custom(
                http_host=self.connection.host,
                http_port=self.connection.port,
                http_secure=self.connection.secure,
                grpc_host=self.connection.host,
                grpc_port=self.connection.grpc_port,
                grpc_secure=self.connection.secure,
                auth_credentials=AuthApiKey(api_key=self.connection.api_key) if self.connection.api_key else None,
                additional_config=AdditionalConfig(
                    timeout=Timeout(
                        init=self.timeouts.init,
                        query=self.timeouts.query,
                        insert=self.timeouts.insert
                    )
                )
            )

            logger.info("Weaviate client created successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to create Weaviate client for {self.url}: {e}")
            raise ConnectivityError(self.url, str(e))

    def ensure_connection(self) -> bool:
        """
        Make sure the underlying client is connected. Single attempt, no retries.

        Returns:
            bool: True if the client was already connected

        Raises:
            ConnectivityError: If the connection cannot be (re)established
        """
        try:
            was_connected = self.client.is_connected()
            if not was_connected:
                logger.info(f"Re-establishing connection to {self.url}")
                self.client.connect()
            return was_connected
        except Exception as e:
            raise ConnectivityError(self.url, str(e))

    def managed_connection(self) -> 'ManagedConnection':
        """
        Context manager that guarantees a live connection for one operation.

        Example:
            with handle.managed_connection() as conn:
                collection = conn.client.collections.get("Article")
        """
        return ManagedConnection(self)

    def close(self):
        """Close Weaviate client connection."""
        if self.client is not None:
            try:
                self.client.close()
                logger.info(f"Weaviate client for {self.url} closed")
            except Exception as e:
                logger.error(f"Error closing client: {e}")


class ManagedConnection:
    """
    Context manager for one operation on a memoized handle.

    On enter the connection is (re)established if needed. The handle is never
    closed on exit: its lifetime belongs to ClientManager.
    """

    def __init__(self, weaviate_client: WeaviateClient):
        self.weaviate_client = weaviate_client

    def __enter__(self) -> WeaviateClient:
        self.weaviate_client.ensure_connection()
        return self.weaviate_client

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False  # Don't suppress exceptions
