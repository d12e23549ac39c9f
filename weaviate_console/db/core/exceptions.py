"""Exception hierarchy for the console data-access layer."""

from typing import Optional


class ConsoleException(Exception):
    """Base exception for all data-access errors."""

    kind = "console_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ConsoleException):
    """No usable service URL is configured."""

    kind = "configuration_error"


class ValidationError(ConsoleException):
    """Malformed input: bad URL, missing field, duplicate seed collection."""

    kind = "validation_error"


class ConnectivityError(ConsoleException):
    """Service unreachable, probe timed out or answered with a non-2xx status."""

    kind = "connectivity_error"

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Connection to {url} failed: {reason}")


class SchemaError(ConsoleException):
    """Schema document missing or malformed."""

    kind = "schema_error"


class NotFoundError(ConsoleException):
    """Named collection does not exist."""

    kind = "not_found"

    def __init__(self, collection_name: str):
        self.collection_name = collection_name
        super().__init__(f"Collection '{collection_name}' not found")


class QueryError(ConsoleException):
    """The service rejected a read, aggregate or mutation query."""

    kind = "query_error"

    def __init__(self, collection_name: str, reason: str):
        self.collection_name = collection_name
        self.reason = reason
        super().__init__(f"Query on '{collection_name}' failed: {reason}")
