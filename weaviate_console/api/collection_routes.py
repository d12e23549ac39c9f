"""
Per-collection endpoints: paged records, record and collection deletion, tenants.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from weaviate_console.api.dependencies import get_console_service
from weaviate_console.db.core.exceptions import ConsoleException
from weaviate_console.db.service import ConsoleService
from weaviate_console.schemas.console_schemas import DeleteRequest
from weaviate_console.schemas.errors import error_content_for, status_for

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/collection/{name}")
async def get_collection_data(
    name: str,
    sortProperty: Optional[str] = None,
    sortOrder: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0,
    tenant: Optional[str] = None,
    service: ConsoleService = Depends(get_console_service)
):
    """
    Fetch one page of a collection's objects.

    Query Parameters:
    - sortProperty: Property to sort by (date properties only, unless configured otherwise)
    - sortOrder: asc or desc (default: asc)
    - limit: Rows per page (default: configured page size)
    - offset: Rows to skip (default: 0)
    - tenant: Tenant to read from (multi-tenant collections)
    """
    try:
        page = await service.list_objects(
            name,
            sort_property=sortProperty,
            sort_order=sortOrder,
            limit=limit,
            offset=offset,
            tenant=tenant
        )
        logger.info(f"Returning {len(page.rows)} rows of {name} (offset={offset}, hasMore={page.has_more})")
        return page.to_dict()
    except ConsoleException as e:
        logger.warning(f"Failed to fetch data of {name}: {e.message}")
        return JSONResponse(status_code=status_for(e), content=error_content_for(e))
    except Exception as e:
        logger.error(f"Unexpected error fetching data of {name}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content=error_content_for(e))


@router.delete("/collection/{name}")
async def delete_from_collection(
    name: str,
    body: DeleteRequest,
    service: ConsoleService = Depends(get_console_service)
):
    """
    Delete objects by id, or drop the whole collection.

    Body is either ``{"objectIds": [...]}`` or ``{"deleteCollection": true}``.
    """
    try:
        if body.deleteCollection:
            logger.info(f"Deleting collection {name}")
            await service.delete_collection(name)
        else:
            logger.info(f"Deleting {len(body.objectIds)} objects from {name}")
            await service.delete_objects(name, body.objectIds, tenant=body.tenant)
        return {"success": True}
    except ConsoleException as e:
        logger.warning(f"Delete in {name} failed: {e.message}")
        return JSONResponse(status_code=status_for(e), content=error_content_for(e))
    except Exception as e:
        logger.error(f"Unexpected error deleting in {name}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content=error_content_for(e))


@router.get("/collection/{name}/tenants")
async def list_collection_tenants(name: str, service: ConsoleService = Depends(get_console_service)):
    """List the tenants of a multi-tenant collection."""
    try:
        tenants = await service.list_tenants(name)
        return {"tenants": [tenant.to_dict() for tenant in tenants]}
    except ConsoleException as e:
        logger.warning(f"Failed to list tenants of {name}: {e.message}")
        return JSONResponse(status_code=status_for(e), content=error_content_for(e))
    except Exception as e:
        logger.error(f"Unexpected error listing tenants of {name}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content=error_content_for(e))
