"""
Collection listing and demo seeding endpoints.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from weaviate_console.api.dependencies import get_console_service
from weaviate_console.db.core.exceptions import ConsoleException
from weaviate_console.db.service import ConsoleService
from weaviate_console.schemas.console_schemas import CollectionsActionRequest
from weaviate_console.schemas.errors import error_content_for, status_for

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/collections")
async def list_collections(service: ConsoleService = Depends(get_console_service)):
    """
    List every collection with its properties and object count.

    Counts are best effort and are 0 when a count lookup failed.
    """
    try:
        collections = await service.list_collections()
        return {"collections": [info.to_dict() for info in collections]}
    except ConsoleException as e:
        logger.error(f"Failed to list collections: {e.message}")
        return JSONResponse(status_code=500, content=error_content_for(e))
    except Exception as e:
        logger.error(f"Unexpected error listing collections: {e}", exc_info=True)
        return JSONResponse(status_code=500, content=error_content_for(e))


@router.post("/collections")
async def create_test_collection(
    body: CollectionsActionRequest,
    service: ConsoleService = Depends(get_console_service)
):
    """Create the demo collection with its sample objects."""
    try:
        logger.info(f"Creating demo collection '{service.seed_collection_name}'")
        result = await service.create_seed_collection()
        return {
            "success": True,
            "collection": service.seed_collection_name,
            "inserted": result.successful,
            "failed": result.failed,
        }
    except ConsoleException as e:
        logger.warning(f"Demo collection not created: {e.message}")
        return JSONResponse(status_code=status_for(e), content=error_content_for(e))
    except Exception as e:
        logger.error(f"Unexpected error creating demo collection: {e}", exc_info=True)
        return JSONResponse(status_code=500, content=error_content_for(e))
