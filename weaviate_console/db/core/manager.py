import asyncio
import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import httpx

from .client import WeaviateClient
from .config import ConnectionConfig, TimeoutConfig, normalize_url
from .connection import ConnectionContext
from .exceptions import ConnectivityError

logger = logging.getLogger(__name__)

SCHEMA_PATH = "/v1/schema"
META_PATH = "/v1/meta"


def compute_connection_id(url: str, version: str, hostname: str) -> str:
    """Fingerprint of one logical Weaviate instance: sha256 of url|version|hostname."""
    return hashlib.sha256(f"{url}|{version}|{hostname}".encode("utf-8")).hexdigest()


@dataclass
class ConnectResult:
    """Outcome of ClientManager.connect()."""
    url: str
    connection_id: str
    new_connection: bool


class ClientManager:
    """
    Owns the lifecycle of the single client handle.

    The handle is created lazily for the connection recorded in the
    ConnectionContext. A reconnect to another instance only updates the context;
    the next get_client() notices the change, builds a new handle and closes the
    old one. Every write of the context and every handle swap happens while
    holding ``context.lock``.

    Example:
        context = ConnectionContext.from_settings(settings)
        clients = ClientManager.from_settings(context, settings)

        result = await clients.connect("localhost:8080")
        handle = await clients.get_client()
    """

    def __init__(
        self,
        context: ConnectionContext,
        api_key: Optional[str] = None,
        timeouts: Optional[TimeoutConfig] = None,
        probe_timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client_factory: Callable[..., WeaviateClient] = WeaviateClient
    ):
        """
        Args:
            context: Shared connection context
            api_key: Optional Weaviate API key used for probes and handles
            timeouts: Timeouts of the typed client
            probe_timeout: Timeout in seconds of each reconnect probe
            transport: Optional httpx transport for the probes
            client_factory: Callable building a handle from (url, connection, timeouts)
        """
        self.context = context
        self.api_key = api_key or None
        self.timeouts = timeouts or TimeoutConfig()
        self.probe_timeout = probe_timeout
        self._transport = transport
        self._client_factory = client_factory
        self._client: Optional[WeaviateClient] = None
        self._client_connection_id = ""

    @classmethod
    def from_settings(cls, context: ConnectionContext, settings, **kwargs) -> 'ClientManager':
        return cls(
            context,
            api_key=settings.weaviate_api_key,
            timeouts=TimeoutConfig.from_settings(settings),
            probe_timeout=settings.probe_timeout_seconds,
            **kwargs
        )

    # ===== Reconnect =====

    async def connect(self, candidate_url: str, grpc_port: Optional[int] = None) -> ConnectResult:
        """
        Validate, probe and (if it is a different instance) switch to a new endpoint.

        Args:
            candidate_url: Endpoint URL; http:// is assumed when no scheme is given
            grpc_port: Optional gRPC port for the new endpoint

        Returns:
            ConnectResult with new_connection=False when the identity is unchanged

        Raises:
            ValidationError: If the URL is malformed
            ConnectivityError: If a probe fails or times out
        """
        url = normalize_url(candidate_url)
        logger.info(f"Probing Weaviate at {url}")

        meta = await self._probe(url)
        version = str(meta.get("version") or "unknown")
        hostname = str(meta.get("hostname") or "unknown")
        connection_id = compute_connection_id(url, version, hostname)

        async with self.context.lock:
            if connection_id == self.context.connection_id:
                logger.info(f"Connecting to the same Weaviate instance ({url}, version {version})")
                return ConnectResult(url=self.context.url, connection_id=connection_id, new_connection=False)

            logger.info(f"Connecting to a different Weaviate instance ({url}, version {version})")
            self.context.replace(url, connection_id, grpc_port)

        return ConnectResult(url=url, connection_id=connection_id, new_connection=True)

    async def _probe(self, url: str) -> Dict[str, Any]:
        """
        Check reachability via the schema endpoint, then fetch server metadata.

        Returns:
            The /v1/meta document
        """
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            async with httpx.AsyncClient(timeout=self.probe_timeout, transport=self._transport) as http:
                schema_response = await http.get(f"{url}{SCHEMA_PATH}", headers=headers)
                self._raise_for_status(url, schema_response, "Failed to connect to Weaviate")

                meta_response = await http.get(f"{url}{META_PATH}", headers=headers)
                self._raise_for_status(url, meta_response, "Failed to get Weaviate server info")
                meta = meta_response.json()
        except httpx.TimeoutException:
            raise ConnectivityError(url, f"Timed out after {self.probe_timeout}s")
        except httpx.HTTPError as e:
            raise ConnectivityError(url, str(e) or e.__class__.__name__)
        except ValueError as e:
            raise ConnectivityError(url, f"Invalid server metadata: {e}")

        if not isinstance(meta, dict):
            raise ConnectivityError(url, "Invalid server metadata: expected a JSON object")
        return meta

    @staticmethod
    def _raise_for_status(url: str, response: httpx.Response, message: str) -> None:
        if not response.is_success:
            raise ConnectivityError(
                url,
                f"{message}. Status: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code
            )

    # ===== Client handle =====

    async def get_client(self) -> WeaviateClient:
        """
        Return the handle for the active connection, building it if needed.

        The handle is rebuilt when the context's URL or connection identity no
        longer matches the one it was built for. The old handle is closed once
        the new one is in place.

        Raises:
            ConnectivityError: If a new handle cannot be built; the previous
                handle, if any, is left in place
        """
        async with self.context.lock:
            current = self._client
            if (
                current is not None
                and current.url == self.context.url
                and self._client_connection_id == self.context.connection_id
            ):
                return current

            url = self.context.url
            connection = ConnectionConfig.from_url(url, grpc_port=self.context.grpc_port, api_key=self.api_key)
            logger.info(f"Building Weaviate client for {url}")
            new_client = await asyncio.to_thread(self._client_factory, url, connection, self.timeouts)
            self._client = new_client
            self._client_connection_id = self.context.connection_id

            if current is not None:
                logger.info(f"Closing previous Weaviate client for {current.url}")
                await asyncio.to_thread(current.close)

        return new_client

    async def close(self) -> None:
        """Close the memoized handle."""
        async with self.context.lock:
            client, self._client = self._client, None
        if client is not None:
            await asyncio.to_thread(client.close)
