"""
Data-access layer of the console: connection management, schema catalog,
paged queries and mutations against one Weaviate instance.
"""

from .core import (
    WeaviateClient,
    ConnectionConfig,
    TimeoutConfig,
    ConnectionContext,
    ClientManager,
    ConnectResult,
    ConsoleException,
    ConfigurationError,
    ValidationError,
    ConnectivityError,
    SchemaError,
    NotFoundError,
    QueryError
)
from .managers import BatchResult, SchemaCatalog, MutationOps, QueryExecutor
from .models import CollectionInfo, PropertyInfo, RecordRow, SortOrder, SortSpec, PageRequest, Page, TenantInfo
from .service import ConsoleService

__all__ = [
    'WeaviateClient',
    'ConnectionConfig',
    'TimeoutConfig',
    'ConnectionContext',
    'ClientManager',
    'ConnectResult',
    'ConsoleException',
    'ConfigurationError',
    'ValidationError',
    'ConnectivityError',
    'SchemaError',
    'NotFoundError',
    'QueryError',
    'BatchResult',
    'SchemaCatalog',
    'MutationOps',
    'QueryExecutor',
    'CollectionInfo',
    'PropertyInfo',
    'RecordRow',
    'SortOrder',
    'SortSpec',
    'PageRequest',
    'Page',
    'TenantInfo',
    'ConsoleService',
]
