"""
Connection endpoints: inspect and switch the active Weaviate endpoint.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from weaviate_console.api.dependencies import get_console_service
from weaviate_console.db.core.exceptions import ConnectivityError, ValidationError
from weaviate_console.db.service import ConsoleService
from weaviate_console.schemas.console_schemas import ConnectionRequest
from weaviate_console.schemas.errors import CONNECTIVITY_HINT, error_content_for

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/connection")
async def set_connection(body: ConnectionRequest, service: ConsoleService = Depends(get_console_service)):
    """
    Switch to another Weaviate endpoint.

    The endpoint is probed first; the active connection only changes when the
    probes succeed and the endpoint is a different instance.
    """
    try:
        result = await service.connect(body.url, grpc_port=body.grpcPort)
        return {
            "success": True,
            "url": result.url,
            "newConnection": result.new_connection,
        }
    except ValidationError as e:
        logger.warning(f"Rejected connection URL '{body.url}': {e.message}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_content_for(e))
    except ConnectivityError as e:
        logger.error(f"Connection to {e.url} failed: {e.reason}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=error_content_for(e, hint=CONNECTIVITY_HINT)
        )
    except Exception as e:
        logger.error(f"Unexpected error connecting to '{body.url}': {e}", exc_info=True)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_content_for(e))


@router.get("/connection")
async def get_connection(service: ConsoleService = Depends(get_console_service)):
    """Current endpoint URL, connection identity and gRPC port."""
    return service.connection_state()
