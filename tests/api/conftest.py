"""
Test fixtures for API route tests.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, Mock

from weaviate_console.api.dependencies import get_console_service
from weaviate_console.db.service import ConsoleService
from weaviate_console.main import create_app


@pytest.fixture
def console_service():
    service = Mock(spec=ConsoleService)
    service.seed_collection_name = "TestCollection"
    for name in (
        "connect",
        "list_collections",
        "get_collection",
        "list_tenants",
        "list_objects",
        "delete_objects",
        "delete_collection",
        "create_seed_collection",
    ):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture
def app(settings, console_service):
    app = create_app(settings)
    app.dependency_overrides[get_console_service] = lambda: console_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    # Not used as a context manager: the lifespan (and its real ClientManager) never runs
    return TestClient(app)
