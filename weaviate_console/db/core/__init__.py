"""
Core modules for Weaviate client and connection management.
"""

from .client import WeaviateClient, ManagedConnection
from .config import ConnectionConfig, TimeoutConfig, normalize_url
from .connection import ConnectionContext
from .manager import ClientManager, ConnectResult, compute_connection_id
from .exceptions import (
    ConsoleException,
    ConfigurationError,
    ValidationError,
    ConnectivityError,
    SchemaError,
    NotFoundError,
    QueryError
)

__all__ = [
    # Client
    'WeaviateClient',
    'ManagedConnection',

    # Configuration
    'ConnectionConfig',
    'TimeoutConfig',
    'normalize_url',

    # Connection
    'ConnectionContext',
    'ClientManager',
    'ConnectResult',
    'compute_connection_id',

    # Exceptions
    'ConsoleException',
    'ConfigurationError',
    'ValidationError',
    'ConnectivityError',
    'SchemaError',
    'NotFoundError',
    'QueryError',
]
