"""
Test fixtures for data-access tests.
"""

from types import SimpleNamespace

import pytest
from unittest.mock import MagicMock


def make_property(name, data_type, description=None):
    return SimpleNamespace(name=name, data_type=SimpleNamespace(value=data_type), description=description)


def make_config(name, properties, references=None, description=None):
    return SimpleNamespace(
        name=name,
        description=description,
        properties=properties,
        references=references or []
    )


@pytest.fixture
def article_config():
    return make_config(
        "Article",
        [
            make_property("title", "text", "Article title"),
            make_property("views", "int"),
            make_property("publishedAt", "date"),
        ],
        references=[SimpleNamespace(name="hasTag", target_collections=["Tag"], description=None)],
        description="News articles"
    )


@pytest.fixture
def tag_config():
    return make_config("Tag", [make_property("label", "text")])


@pytest.fixture
def collections_by_name():
    """Per-collection mocks returned by collections.get(name)."""
    return {}


@pytest.fixture
def typed_client(mock_weaviate_client, collections_by_name):
    """The mock typed client, with collections.get() dispatching by name."""
    typed = mock_weaviate_client.typed

    def get_collection(name):
        if name not in collections_by_name:
            collections_by_name[name] = MagicMock(name=f"collection:{name}")
        return collections_by_name[name]

    typed.collections.get = MagicMock(side_effect=get_collection)
    return typed
