"""
Tests for MutationOps.
"""

from types import SimpleNamespace

import pytest
from unittest.mock import patch

from weaviate_console.db.core.exceptions import NotFoundError, QueryError, ValidationError
from weaviate_console.db.managers.mutations import SEED_OBJECTS, SEED_PROPERTIES, MutationOps

ID_1 = "7b5c3d2e-1f4a-4b6c-9d8e-0a1b2c3d4e5f"
ID_2 = "a1f0e9d8-c7b6-4a5b-8c9d-e0f1a2b3c4d5"


class TestDeleteObjects:
    """Test MutationOps.delete_objects()."""

    def test_empty_ids_is_a_no_op(self, mock_weaviate_client, typed_client):
        MutationOps(mock_weaviate_client).delete_objects("Article", [])

        mock_weaviate_client.managed_connection.assert_not_called()
        typed_client.collections.get.assert_not_called()

    def test_bulk_delete_by_id(self, mock_weaviate_client, typed_client):
        collection = typed_client.collections.get("Article")
        collection.data.delete_many.return_value = SimpleNamespace(matches=2, successful=2, failed=0)

        with patch("weaviate_console.db.managers.mutations.Filter") as filter_cls:
            MutationOps(mock_weaviate_client).delete_objects("Article", [ID_1, ID_2])

        filter_cls.by_id.return_value.contains_any.assert_called_once_with([ID_1, ID_2])
        collection.data.delete_many.assert_called_once_with(
            where=filter_cls.by_id.return_value.contains_any.return_value
        )

    def test_tenant_is_passed_through(self, mock_weaviate_client, typed_client):
        collection = typed_client.collections.get("Article")

        MutationOps(mock_weaviate_client).delete_objects("Article", [ID_1], tenant="tenantA")

        collection.with_tenant.assert_called_once_with("tenantA")
        collection.with_tenant.return_value.data.delete_many.assert_called_once()

    def test_service_failure(self, mock_weaviate_client, typed_client):
        typed_client.collections.get("Article").data.delete_many.side_effect = RuntimeError("deadline exceeded")

        with pytest.raises(QueryError, match="deadline exceeded"):
            MutationOps(mock_weaviate_client).delete_objects("Article", [ID_1])

    def test_non_uuid_id_is_rejected_before_connecting(self, mock_weaviate_client, typed_client):
        with pytest.raises(ValidationError, match="not-a-uuid"):
            MutationOps(mock_weaviate_client).delete_objects("Article", [ID_1, "not-a-uuid"])

        mock_weaviate_client.managed_connection.assert_not_called()
        typed_client.collections.get.assert_not_called()

    def test_ids_are_normalized(self, mock_weaviate_client, typed_client):
        with patch("weaviate_console.db.managers.mutations.Filter") as filter_cls:
            MutationOps(mock_weaviate_client).delete_objects("Article", [ID_1.upper()])

        filter_cls.by_id.return_value.contains_any.assert_called_once_with([ID_1])


class TestDeleteCollection:
    """Test MutationOps.delete_collection()."""

    def test_delete(self, mock_weaviate_client, typed_client):
        MutationOps(mock_weaviate_client).delete_collection("Article")

        typed_client.collections.delete.assert_called_once_with("Article")

    def test_unknown_collection_touches_nothing(self, mock_weaviate_client, typed_client):
        typed_client.collections.exists.return_value = False

        with pytest.raises(NotFoundError, match="Missing"):
            MutationOps(mock_weaviate_client).delete_collection("Missing")

        typed_client.collections.delete.assert_not_called()

    def test_service_failure(self, mock_weaviate_client, typed_client):
        typed_client.collections.delete.side_effect = RuntimeError("forbidden")

        with pytest.raises(QueryError, match="forbidden"):
            MutationOps(mock_weaviate_client).delete_collection("Article")


class TestCreateSeedCollection:
    """Test MutationOps.create_seed_collection()."""

    def test_creates_schema_and_inserts_rows(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {"Article": object()}
        created = typed_client.collections.create.return_value
        created.data.insert_many.return_value = SimpleNamespace(errors={})

        result = MutationOps(mock_weaviate_client).create_seed_collection()

        kwargs = typed_client.collections.create.call_args.kwargs
        assert kwargs["name"] == "TestCollection"
        assert kwargs["properties"] is SEED_PROPERTIES
        assert [prop.name for prop in SEED_PROPERTIES] == ["title", "content", "views", "publishedAt"]
        assert "vector_config" in kwargs
        assert "vectorizer_config" not in kwargs
        created.data.insert_many.assert_called_once_with(SEED_OBJECTS)
        assert len(SEED_OBJECTS) == 3
        assert (result.total, result.successful, result.failed) == (3, 3, 0)

    def test_partial_insert_failure(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {}
        created = typed_client.collections.create.return_value
        created.data.insert_many.return_value = SimpleNamespace(
            errors={1: SimpleNamespace(message="invalid date")}
        )

        result = MutationOps(mock_weaviate_client).create_seed_collection()

        assert result.successful == 2
        assert result.errors == [{"index": 1, "message": "invalid date"}]

    def test_duplicate_seed_inserts_nothing(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {"TestCollection": object()}

        with pytest.raises(ValidationError, match="already exists"):
            MutationOps(mock_weaviate_client).create_seed_collection()

        typed_client.collections.create.assert_not_called()

    def test_custom_seed_name(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {"TestCollection": object()}
        typed_client.collections.create.return_value.data.insert_many.return_value = SimpleNamespace(errors={})

        MutationOps(mock_weaviate_client, seed_collection_name="DemoArticles").create_seed_collection()

        assert typed_client.collections.create.call_args.kwargs["name"] == "DemoArticles"

    def test_seed_name_is_capitalized(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {}
        typed_client.collections.create.return_value.data.insert_many.return_value = SimpleNamespace(errors={})

        MutationOps(mock_weaviate_client, seed_collection_name="demoArticles").create_seed_collection()

        assert typed_client.collections.create.call_args.kwargs["name"] == "DemoArticles"

    def test_lowercase_seed_name_detects_existing_collection(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {"DemoArticles": object()}

        with pytest.raises(ValidationError, match="DemoArticles"):
            MutationOps(mock_weaviate_client, seed_collection_name="demoArticles").create_seed_collection()

        typed_client.collections.create.assert_not_called()

    def test_create_failure(self, mock_weaviate_client, typed_client):
        typed_client.collections.list_all.return_value = {}
        typed_client.collections.create.side_effect = RuntimeError("vectorizer module not found")

        with pytest.raises(QueryError, match="vectorizer"):
            MutationOps(mock_weaviate_client).create_seed_collection()
