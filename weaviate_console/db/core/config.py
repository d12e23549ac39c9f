from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from .exceptions import ValidationError

DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443
DEFAULT_GRPC_PORT = 50051


def normalize_url(candidate: str) -> str:
    """
    Normalize and validate a Weaviate endpoint URL.

    URLs without an explicit http(s):// scheme are assumed to be http://.
    Trailing slashes are removed so that the same endpoint always produces
    the same connection identity.

    Raises:
        ValidationError: If the URL is empty or malformed
    """
    if candidate is None or not str(candidate).strip():
        raise ValidationError("URL is required")

    url = str(candidate).strip()
    if any(ch.isspace() for ch in url):
        raise ValidationError(f"Invalid URL format: '{url}' contains whitespace")

    if not url.lower().startswith(("http://", "https://")):
        if "://" in url:
            raise ValidationError(
                f"Invalid URL format: URL must start with http:// or https://, got '{url}'"
            )
        url = f"http://{url}"

    parts = urlsplit(url)
    if not parts.hostname:
        raise ValidationError(f"Invalid URL format: missing host in '{url}'")
    try:
        parts.port
    except ValueError:
        raise ValidationError(f"Invalid URL format: bad port in '{url}'")

    return url.rstrip("/")


@dataclass
class ConnectionConfig:
    """
    Weaviate connection configuration.

    Encapsulates all parameters needed to build a client handle for one endpoint.
    """
    host: str = "127.0.0.1"
    port: int = 8080
    secure: bool = False
    grpc_port: int = DEFAULT_GRPC_PORT
    api_key: Optional[str] = None

    @classmethod
    def from_url(
        cls,
        url: str,
        grpc_port: Optional[int] = None,
        api_key: Optional[str] = None
    ) -> 'ConnectionConfig':
        """
        Create configuration from an endpoint URL.

        Args:
            url: Endpoint URL, normalized with normalize_url()
            grpc_port: gRPC port (default: 50051)
            api_key: Optional API key

        Returns:
            ConnectionConfig instance
        """
        parts = urlsplit(normalize_url(url))
        secure = parts.scheme == "https"
        port = parts.port or (DEFAULT_HTTPS_PORT if secure else DEFAULT_HTTP_PORT)
        return cls(
            host=parts.hostname,
            port=port,
            secure=secure,
            grpc_port=grpc_port or DEFAULT_GRPC_PORT,
            api_key=api_key or None
        )

    def to_dict(self) -> dict:
        """Convert to dictionary (API key masked)."""
        return {
            'host': self.host,
            'port': self.port,
            'secure': self.secure,
            'grpc_port': self.grpc_port,
            'api_key': '***' if self.api_key else None
        }


@dataclass
class TimeoutConfig:
    """
    Timeout configuration for Weaviate operations.

    All timeouts are in seconds.
    """
    init: int = 10
    query: int = 60
    insert: int = 60

    @classmethod
    def from_settings(cls, settings) -> 'TimeoutConfig':
        """Create configuration from application settings."""
        return cls(
            init=settings.weaviate_init_timeout,
            query=settings.weaviate_query_timeout,
            insert=settings.weaviate_insert_timeout
        )
