"""Destructive operations: bulk object delete, collection drop and demo seeding."""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from weaviate.classes.config import Configure, DataType, Property
from weaviate.classes.query import Filter

from ..core.client import WeaviateClient
from ..core.exceptions import NotFoundError, QueryError, ValidationError
from ..telemetry import track_duration
from .batch import BatchResult

logger = logging.getLogger(__name__)

DEFAULT_SEED_COLLECTION = "TestCollection"


def collection_name(name: str) -> str:
    """Collection name as Weaviate stores it: first letter upper-cased."""
    return name[:1].upper() + name[1:]


def validate_object_ids(object_ids: Sequence[str]) -> List[str]:
    """
    Check that every id is a UUID.

    Raises:
        ValidationError: Naming the first id that is not a UUID
    """
    ids = []
    for object_id in object_ids:
        try:
            ids.append(str(uuid.UUID(str(object_id))))
        except ValueError:
            raise ValidationError(f"Invalid object id '{object_id}': expected a UUID")
    return ids


SEED_PROPERTIES = [
    Property(name="title", data_type=DataType.TEXT, description="Article title"),
    Property(name="content", data_type=DataType.TEXT, description="Article body"),
    Property(name="views", data_type=DataType.INT, description="Number of views"),
    Property(name="publishedAt", data_type=DataType.DATE, description="Publication date"),
]

SEED_OBJECTS = [
    {
        "title": "Getting started with vector search",
        "content": "Vector databases store embeddings next to the objects they describe.",
        "views": 1520,
        "publishedAt": datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
    },
    {
        "title": "Designing collection schemas",
        "content": "Each collection declares typed properties shared by all of its objects.",
        "views": 845,
        "publishedAt": datetime(2024, 3, 2, 14, 0, tzinfo=timezone.utc),
    },
    {
        "title": "Paging through large collections",
        "content": "Use limit and offset to walk a collection one window at a time.",
        "views": 312,
        "publishedAt": datetime(2024, 6, 21, 18, 45, tzinfo=timezone.utc),
    },
]


class MutationOps:
    """
    Mutations against one Weaviate instance.

    None of these operations is retried, and none is transactional: a
    partially applied mutation stays partially applied.

    Example:
        ops = MutationOps(handle)
        ops.delete_objects("Article", ["7b5c...", "a1f0..."])
        ops.delete_collection("Article")
        result = ops.create_seed_collection()
    """

    def __init__(self, client: WeaviateClient, seed_collection_name: str = DEFAULT_SEED_COLLECTION):
        self.client = client
        self.seed_collection_name = collection_name(seed_collection_name)

    @track_duration(
        "delete_objects",
        extract_labels=lambda self, collection_name, *args, **kwargs: {"collection": collection_name}
    )
    def delete_objects(
        self,
        collection_name: str,
        object_ids: Sequence[str],
        tenant: Optional[str] = None
    ) -> None:
        """
        Delete objects by id in one bulk request.

        An empty id list is a no-op and never reaches the service. Ids that do
        not match any object are not reported.

        Raises:
            ValidationError: If an id is not a UUID (nothing is deleted)
            QueryError: If the delete request fails
        """
        ids = validate_object_ids(object_ids)
        if not ids:
            logger.info(f"No object ids given for {collection_name}, nothing to delete")
            return

        with self.client.managed_connection() as conn:
            try:
                collection = conn.client.collections.get(collection_name)
                if tenant:
                    collection = collection.with_tenant(tenant)
                result = collection.data.delete_many(where=Filter.by_id().contains_any(ids))
            except Exception as e:
                logger.error(f"Bulk delete in {collection_name} failed: {e}")
                raise QueryError(collection_name, str(e))

        logger.info(
            f"Bulk delete in {collection_name}: requested={len(ids)}, "
            f"matched={getattr(result, 'matches', '?')}, successful={getattr(result, 'successful', '?')}, "
            f"failed={getattr(result, 'failed', '?')}"
        )

    @track_duration("delete_collection", extract_labels=lambda self, name: {"collection": name})
    def delete_collection(self, name: str) -> None:
        """
        Irreversibly drop a collection and all of its objects.

        Raises:
            NotFoundError: If the collection does not exist
            QueryError: If the service rejects the request
        """
        with self.client.managed_connection() as conn:
            try:
                exists = conn.client.collections.exists(name)
            except Exception as e:
                raise QueryError(name, str(e))
            if not exists:
                logger.info(f"Collection {name} does not exist, nothing deleted")
                raise NotFoundError(name)

            try:
                conn.client.collections.delete(name)
            except Exception as e:
                logger.error(f"Failed to delete collection {name}: {e}")
                raise QueryError(name, str(e))

        logger.info(f"Collection {name} deleted")

    @track_duration("create_seed_collection")
    def create_seed_collection(self) -> BatchResult:
        """
        Create the demo collection and insert the sample objects.

        Raises:
            ValidationError: If the demo collection already exists (nothing is inserted)
            QueryError: If creating the collection or the insert request fails
        """
        name = self.seed_collection_name

        with self.client.managed_connection() as conn:
            try:
                existing = conn.client.collections.list_all(simple=True)
            except Exception as e:
                raise QueryError(name, f"Failed to list existing collections: {e}")
            if name in existing:
                raise ValidationError(f"Collection '{name}' already exists")

            try:
                collection = conn.client.collections.create(
                    name=name,
                    description="Demo collection with sample articles",
                    properties=SEED_PROPERTIES,
                    vector_config=Configure.Vectors.self_provided()
                )
                logger.info(f"Collection {name} created")

                response = collection.data.insert_many(SEED_OBJECTS)
            except Exception as e:
                logger.error(f"Failed to seed collection {name}: {e}")
                raise QueryError(name, str(e))

        result = BatchResult.from_insert_many(len(SEED_OBJECTS), response)
        if result.has_errors:
            logger.warning(f"Seeding {name} partially failed: {result} errors={result.errors}")
        else:
            logger.info(f"Seeded {name}: {result}")
        return result
