"""Paged, optionally sorted reads of collection objects."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from weaviate.classes.query import Sort

from ..core.client import WeaviateClient
from ..core.exceptions import QueryError, ValidationError
from ..core.values import normalize_properties
from ..models import IDENTITY_FIELD, RecordRow, SortSpec
from ..telemetry import track_duration

logger = logging.getLogger(__name__)


class QueryExecutor:
    """
    Builds and issues fetch queries against one collection.

    Only the requested properties are returned, plus the object identity.
    Sort eligibility is the caller's concern: the sort directive is passed
    through and a rejection by the service surfaces as QueryError.

    Example:
        rows = QueryExecutor(handle).list_objects(
            "Article",
            ["title", "publishedAt"],
            sort=SortSpec("publishedAt", SortOrder.DESC),
            limit=50,
            offset=0,
        )
    """

    def __init__(self, client: WeaviateClient):
        self.client = client

    @staticmethod
    def build_query(
        properties: Sequence[str],
        sort: Optional[SortSpec],
        limit: int,
        offset: int
    ) -> Dict[str, Any]:
        """
        Build the keyword arguments of a fetch_objects call.

        Raises:
            ValidationError: If limit < 1 or offset < 0
        """
        if limit < 1:
            raise ValidationError(f"limit must be at least 1, got {limit}")
        if offset < 0:
            raise ValidationError(f"offset must not be negative, got {offset}")

        params: Dict[str, Any] = {
            "limit": limit,
            "offset": offset,
            "return_properties": list(properties),
        }
        if sort is not None:
            params["sort"] = Sort.by_property(name=sort.property, ascending=sort.ascending)
        return params

    @track_duration(
        "list_objects",
        extract_labels=lambda self, collection_name, *args, **kwargs: {"collection": collection_name}
    )
    def list_objects(
        self,
        collection_name: str,
        properties: Sequence[str],
        sort: Optional[SortSpec] = None,
        limit: int = 100,
        offset: int = 0,
        tenant: Optional[str] = None
    ) -> List[RecordRow]:
        """
        Fetch one page of objects.

        Args:
            collection_name: Collection to read
            properties: Property names to return (never all implicitly)
            sort: Optional sort directive
            limit: Maximum number of rows
            offset: Number of rows to skip
            tenant: Optional tenant name, passed through unchanged

        Returns:
            At most ``limit`` rows, each carrying the requested properties and
            ``identity``. Order is service-defined when no sort is given.

        Raises:
            ValidationError: If limit/offset are out of range
            QueryError: If the service rejects the query
        """
        params = self.build_query(properties, sort, limit, offset)
        logger.info(
            f"Fetching {collection_name}: properties={params['return_properties']}, "
            f"sort={sort}, limit={limit}, offset={offset}, tenant={tenant}"
        )

        with self.client.managed_connection() as conn:
            try:
                collection = conn.client.collections.get(collection_name)
                if tenant:
                    collection = collection.with_tenant(tenant)
                response = collection.query.fetch_objects(**params)
            except Exception as e:
                logger.error(f"Fetch query on {collection_name} failed: {e}")
                raise QueryError(collection_name, str(e))

        rows: List[RecordRow] = []
        for obj in response.objects:
            row = normalize_properties(obj.properties)
            row[IDENTITY_FIELD] = str(obj.uuid)
            rows.append(row)

        logger.info(f"Fetched {len(rows)} rows from {collection_name}")
        return rows[:limit]
