import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from .core.connection import ConnectionContext
from .core.exceptions import ValidationError
from .core.manager import ClientManager, ConnectResult
from .managers.batch import BatchResult
from .managers.catalog import SchemaCatalog
from .managers.mutations import MutationOps, collection_name, validate_object_ids
from .managers.query import QueryExecutor
from .models import CollectionInfo, Page, PageRequest, SortOrder, SortSpec, TenantInfo

logger = logging.getLogger(__name__)


class ConsoleService:
    """
    Async facade over the data-access layer, used by the HTTP routes.

    Each call captures the current client handle once and runs the blocking
    typed-client work in a worker thread. Browsing policy (page size limits
    and sortable properties) is enforced here.

    Example:
        service = ConsoleService(clients, settings)
        collections = await service.list_collections()
        page = await service.list_objects("Article", sort_property="publishedAt", sort_order="desc")
    """

    def __init__(
        self,
        clients: ClientManager,
        page_size: int = 100,
        max_page_size: int = 250,
        sort_date_properties_only: bool = True,
        seed_collection_name: str = "TestCollection"
    ):
        self.clients = clients
        self.page_size = page_size
        self.max_page_size = max_page_size
        self.sort_date_properties_only = sort_date_properties_only
        self.seed_collection_name = collection_name(seed_collection_name)

    @classmethod
    def from_settings(cls, clients: ClientManager, settings) -> 'ConsoleService':
        return cls(
            clients,
            page_size=settings.page_size,
            max_page_size=settings.max_page_size,
            sort_date_properties_only=settings.sort_date_properties_only,
            seed_collection_name=settings.seed_collection_name
        )

    @property
    def context(self) -> ConnectionContext:
        return self.clients.context

    # ===== Connection =====

    async def connect(self, url: str, grpc_port: Optional[int] = None) -> ConnectResult:
        return await self.clients.connect(url, grpc_port=grpc_port)

    def connection_state(self) -> Dict[str, Any]:
        return self.context.to_dict()

    # ===== Schema =====

    async def list_collections(self) -> List[CollectionInfo]:
        handle = await self.clients.get_client()
        return await asyncio.to_thread(SchemaCatalog(handle).list_collections)

    async def get_collection(self, name: str) -> CollectionInfo:
        handle = await self.clients.get_client()
        return await asyncio.to_thread(SchemaCatalog(handle).get_collection, name)

    async def list_tenants(self, name: str) -> List[TenantInfo]:
        handle = await self.clients.get_client()
        return await asyncio.to_thread(SchemaCatalog(handle).list_tenants, name)

    # ===== Records =====

    def page_request(self, limit: Optional[int] = None, offset: int = 0) -> PageRequest:
        """
        Resolve paging parameters against the configured page sizes.

        Raises:
            ValidationError: If limit is outside 1..max_page_size or offset is negative
        """
        limit = self.page_size if limit is None else limit
        if limit < 1 or limit > self.max_page_size:
            raise ValidationError(f"limit must be between 1 and {self.max_page_size}, got {limit}")
        if offset < 0:
            raise ValidationError(f"offset must not be negative, got {offset}")
        return PageRequest(limit=limit, offset=offset)

    def sort_spec(
        self,
        collection: CollectionInfo,
        sort_property: Optional[str],
        sort_order: Optional[str] = None
    ) -> Optional[SortSpec]:
        """
        Resolve a sort directive against the collection schema.

        Raises:
            ValidationError: If the order is unknown, the property does not exist,
                or sorting is restricted to date properties and this one is not one
        """
        if not sort_property:
            return None

        try:
            order = SortOrder((sort_order or SortOrder.ASC.value).lower())
        except ValueError:
            raise ValidationError(f"sortOrder must be 'asc' or 'desc', got '{sort_order}'")

        prop = collection.get_property(sort_property)
        if prop is None or prop.is_reference:
            raise ValidationError(f"Collection '{collection.name}' has no sortable property '{sort_property}'")
        if self.sort_date_properties_only and not prop.is_date_typed:
            raise ValidationError(
                f"Sorting is only allowed on date properties; '{sort_property}' is {prop.primary_type}"
            )
        return SortSpec(property=sort_property, order=order)

    async def list_objects(
        self,
        collection_name: str,
        sort_property: Optional[str] = None,
        sort_order: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        tenant: Optional[str] = None
    ) -> Page:
        """
        Fetch one page of a collection, returning every value property.

        Raises:
            ValidationError: If paging or sort parameters are invalid
            NotFoundError: If the collection does not exist
            QueryError: If the service rejects the query
        """
        request = self.page_request(limit, offset)
        handle = await self.clients.get_client()

        collection = await asyncio.to_thread(SchemaCatalog(handle).get_collection, collection_name)
        sort = self.sort_spec(collection, sort_property, sort_order)

        rows = await asyncio.to_thread(
            QueryExecutor(handle).list_objects,
            collection_name,
            collection.value_property_names,
            sort,
            request.limit,
            request.offset,
            tenant
        )
        return Page(rows=rows, request=request)

    # ===== Mutations =====

    async def delete_objects(
        self,
        collection_name: str,
        object_ids: Sequence[str],
        tenant: Optional[str] = None
    ) -> None:
        """
        Raises:
            ValidationError: If an object id is not a UUID
            NotFoundError: If the collection does not exist
            QueryError: If the delete request fails
        """
        object_ids = validate_object_ids(object_ids)
        if not object_ids:
            logger.info(f"Empty delete request for {collection_name}, nothing to do")
            return

        handle = await self.clients.get_client()
        await asyncio.to_thread(SchemaCatalog(handle).get_collection, collection_name)
        await asyncio.to_thread(MutationOps(handle).delete_objects, collection_name, object_ids, tenant)

    async def delete_collection(self, name: str) -> None:
        handle = await self.clients.get_client()
        await asyncio.to_thread(MutationOps(handle).delete_collection, name)

    async def create_seed_collection(self) -> BatchResult:
        handle = await self.clients.get_client()
        ops = MutationOps(handle, seed_collection_name=self.seed_collection_name)
        return await asyncio.to_thread(ops.create_seed_collection)
