"""
Common error response content for API endpoints.

Every error body has the shape ``{error, kind, details[, hint]}``:
``error`` is a machine-readable code, ``kind`` the data-access error kind,
``details`` a human-readable message.
"""

from typing import Any, Dict, Optional

from weaviate_console.db.core.exceptions import ConsoleException


class ErrorCode:
    """Common error codes used across the application."""

    # Request Validation (4xx)
    INVALID_REQUEST = "invalid_request"
    INVALID_PARAMETER = "invalid_parameter"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Server Errors (5xx)
    INTERNAL_ERROR = "internal_error"
    DATABASE_ERROR = "database_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


# HTTP status and error code for each data-access error kind
KIND_STATUS = {
    "configuration_error": (500, ErrorCode.INTERNAL_ERROR),
    "validation_error": (400, ErrorCode.INVALID_PARAMETER),
    "connectivity_error": (500, ErrorCode.EXTERNAL_SERVICE_ERROR),
    "schema_error": (500, ErrorCode.DATABASE_ERROR),
    "not_found": (404, ErrorCode.RESOURCE_NOT_FOUND),
    "query_error": (500, ErrorCode.DATABASE_ERROR),
}

CONNECTIVITY_HINT = "Check that the Weaviate URL is correct and the instance is reachable from the console"


def create_error_content(
    error: str,
    kind: str,
    details: str,
    hint: Optional[str] = None
) -> Dict[str, Any]:
    """
    Helper function to create a structured error body.

    Example:
        return JSONResponse(
            status_code=404,
            content=create_error_content(
                ErrorCode.RESOURCE_NOT_FOUND,
                "not_found",
                "Collection 'Article' not found"
            )
        )
    """
    content = {
        "error": error,
        "kind": kind,
        "details": details,
    }
    if hint:
        content["hint"] = hint
    return content


def status_for(exc: Exception) -> int:
    """HTTP status for an exception; anything outside the taxonomy is a 500."""
    if isinstance(exc, ConsoleException):
        return KIND_STATUS.get(exc.kind, (500, ErrorCode.INTERNAL_ERROR))[0]
    return 500


def error_content_for(exc: Exception, hint: Optional[str] = None) -> Dict[str, Any]:
    """Error body for an exception raised by the data-access layer."""
    if isinstance(exc, ConsoleException):
        _, code = KIND_STATUS.get(exc.kind, (500, ErrorCode.INTERNAL_ERROR))
        return create_error_content(code, exc.kind, exc.message, hint)
    return create_error_content(ErrorCode.INTERNAL_ERROR, "internal_error", f"Internal server error: {exc}")
