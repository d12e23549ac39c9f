import asyncio
import logging
from typing import Optional

from .config import DEFAULT_GRPC_PORT, normalize_url
from .exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


class ConnectionContext:
    """
    Holder of the active connection: endpoint URL, connection identity and gRPC port.

    Constructed once at startup and passed to every component that needs it.
    Fields may be read freely; they are written only by ClientManager while
    holding ``lock``.
    """

    def __init__(self, url: str, grpc_port: int = DEFAULT_GRPC_PORT):
        self.url = url
        self.connection_id = ""
        self.grpc_port = grpc_port
        self.lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings) -> 'ConnectionContext':
        """
        Create the context from the configured default endpoint.

        Raises:
            ConfigurationError: If no default URL is configured or it is malformed
        """
        if not settings.weaviate_url:
            raise ConfigurationError(
                "WEAVIATE_URL is not configured; the console needs a default Weaviate endpoint"
            )
        try:
            url = normalize_url(settings.weaviate_url)
        except ValidationError as e:
            raise ConfigurationError(f"WEAVIATE_URL is invalid: {e.message}")

        logger.info(f"Default Weaviate endpoint: {url}")
        return cls(url, grpc_port=settings.weaviate_grpc_port)

    def replace(self, url: str, connection_id: str, grpc_port: Optional[int] = None):
        """Swap the active connection. Caller must hold ``lock``."""
        self.url = url
        self.connection_id = connection_id
        if grpc_port:
            self.grpc_port = grpc_port

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "connectionId": self.connection_id,
            "grpcPort": self.grpc_port,
        }
