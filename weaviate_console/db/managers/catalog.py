"""Schema catalog: collections, their properties, object counts and tenants."""

import logging
from typing import Any, Dict, List, Mapping

from ..core.client import WeaviateClient
from ..core.exceptions import NotFoundError, QueryError, SchemaError
from ..models import CollectionInfo, PropertyInfo, TenantInfo
from ..telemetry import count_fallbacks, track_duration

logger = logging.getLogger(__name__)


def _type_tag(data_type: Any) -> str:
    return str(getattr(data_type, "value", data_type))


def to_collection_info(config: Any, count: int = 0) -> CollectionInfo:
    """
    Convert a typed-client collection config into a CollectionInfo.

    Cross-references are listed after plain properties, tagged with their
    target collection names.
    """
    properties: List[PropertyInfo] = []
    for prop in getattr(config, "properties", None) or []:
        properties.append(PropertyInfo(
            name=prop.name,
            data_type=[_type_tag(prop.data_type)],
            description=getattr(prop, "description", None)
        ))
    for ref in getattr(config, "references", None) or []:
        properties.append(PropertyInfo(
            name=ref.name,
            data_type=list(getattr(ref, "target_collections", None) or []),
            description=getattr(ref, "description", None),
            is_reference=True
        ))

    return CollectionInfo(
        name=config.name,
        description=getattr(config, "description", None),
        count=count,
        properties=properties
    )


class SchemaCatalog:
    """
    Read-only view of the collections defined on one Weaviate instance.

    Nothing is cached: every call reads the schema again.

    Example:
        catalog = SchemaCatalog(handle)
        for info in catalog.list_collections():
            print(info.name, info.count)
    """

    def __init__(self, client: WeaviateClient):
        self.client = client

    @track_duration("fetch_schema")
    def fetch_schema(self) -> Dict[str, Any]:
        """
        Fetch the full schema document, keyed by collection name in schema order.

        Raises:
            SchemaError: If the schema cannot be read or is malformed
        """
        try:
            with self.client.managed_connection() as conn:
                schema = conn.client.collections.list_all(simple=False)
        except Exception as e:
            logger.error(f"Failed to fetch schema from {self.client.url}: {e}")
            raise SchemaError(f"Failed to fetch schema: {e}")

        if not isinstance(schema, Mapping):
            raise SchemaError(f"Malformed schema document: expected a mapping, got {type(schema).__name__}")
        return dict(schema)

    @track_duration("count_objects", extract_labels=lambda self, name: {"collection": name})
    def count_objects(self, name: str) -> int:
        """
        Count the objects of one collection with an aggregate query.

        Best effort: any failure is logged and the count defaults to 0.
        """
        try:
            with self.client.managed_connection() as conn:
                result = conn.client.collections.get(name).aggregate.over_all(total_count=True)
            count = result.total_count or 0
            logger.info(f"Count for {name}: {count}")
            return max(int(count), 0)
        except Exception as e:
            logger.warning(f"Error executing aggregate query for {name}, defaulting count to 0: {e}")
            count_fallbacks.add(1, attributes={"collection": name})
            return 0

    @track_duration("list_collections")
    def list_collections(self) -> List[CollectionInfo]:
        """
        List every collection with its properties and object count.

        Counts are fetched one collection at a time; a failed count never
        fails the listing.

        Raises:
            SchemaError: If the schema itself cannot be fetched
        """
        schema = self.fetch_schema()
        logger.info(f"Schema lists {len(schema)} collections")

        result = []
        for name, config in schema.items():
            result.append(to_collection_info(config, count=self.count_objects(name)))
        return result

    def get_collection(self, name: str) -> CollectionInfo:
        """
        Look up one collection's schema without counting its objects.

        Raises:
            NotFoundError: If no collection has this exact name
            SchemaError: If the schema cannot be fetched
        """
        schema = self.fetch_schema()
        if name not in schema:
            raise NotFoundError(name)
        return to_collection_info(schema[name])

    @track_duration("list_tenants", extract_labels=lambda self, name: {"collection": name})
    def list_tenants(self, name: str) -> List[TenantInfo]:
        """
        List the tenants of a multi-tenant collection.

        Raises:
            NotFoundError: If the collection does not exist
            QueryError: If the service rejects the request (e.g. multi-tenancy disabled)
        """
        with self.client.managed_connection() as conn:
            try:
                if not conn.client.collections.exists(name):
                    raise NotFoundError(name)
                tenants = conn.client.collections.get(name).tenants.get()
            except NotFoundError:
                raise
            except Exception as e:
                logger.error(f"Failed to fetch tenants for {name}: {e}")
                raise QueryError(name, str(e))

        result = []
        for tenant_name, tenant in tenants.items():
            status = getattr(tenant, "activity_status", None)
            result.append(TenantInfo(name=tenant_name, activity_status=_type_tag(status) if status else "UNKNOWN"))
        logger.info(f"Found {len(result)} tenants for {name}")
        return result
