"""
Managers for schema, query and mutation operations.
"""

from .batch import BatchResult
from .catalog import SchemaCatalog
from .mutations import MutationOps
from .query import QueryExecutor

__all__ = ['BatchResult', 'SchemaCatalog', 'MutationOps', 'QueryExecutor']
