"""
Tests for /api/collection/{name}.
"""

from datetime import datetime, timezone

from weaviate_console.db.core.exceptions import ConnectivityError, NotFoundError, QueryError, ValidationError
from weaviate_console.db.models import Page, PageRequest, TenantInfo

ID_1 = "7b5c3d2e-1f4a-4b6c-9d8e-0a1b2c3d4e5f"
ID_2 = "a1f0e9d8-c7b6-4a5b-8c9d-e0f1a2b3c4d5"


class TestGetCollectionData:
    def test_success(self, client, console_service):
        console_service.list_objects.return_value = Page(
            rows=[{"title": "a", "publishedAt": datetime(2024, 1, 15, tzinfo=timezone.utc), "identity": "id-1"}],
            request=PageRequest(limit=1, offset=0)
        )

        response = client.get(
            "/api/collection/Article",
            params={"sortProperty": "publishedAt", "sortOrder": "desc", "limit": 1, "offset": 0}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["hasMore"] is True
        assert body["nextOffset"] == 1
        assert body["data"][0]["identity"] == "id-1"
        assert body["data"][0]["publishedAt"].startswith("2024-01-15T00:00:00")
        console_service.list_objects.assert_awaited_once_with(
            "Article",
            sort_property="publishedAt",
            sort_order="desc",
            limit=1,
            offset=0,
            tenant=None
        )

    def test_defaults(self, client, console_service):
        console_service.list_objects.return_value = Page(rows=[], request=PageRequest(limit=100))

        response = client.get("/api/collection/Article")

        assert response.json() == {"data": [], "hasMore": False, "nextOffset": 0}
        kwargs = console_service.list_objects.call_args.kwargs
        assert kwargs["limit"] is None
        assert kwargs["offset"] == 0

    def test_non_numeric_limit(self, client, console_service):
        response = client.get("/api/collection/Article", params={"limit": "many"})

        assert response.status_code == 400
        console_service.list_objects.assert_not_called()

    def test_invalid_sort(self, client, console_service):
        console_service.list_objects.side_effect = ValidationError(
            "Sorting is only allowed on date properties; 'views' is int"
        )

        response = client.get("/api/collection/Article", params={"sortProperty": "views"})

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_parameter"

    def test_unknown_collection(self, client, console_service):
        console_service.list_objects.side_effect = NotFoundError("Missing")

        response = client.get("/api/collection/Missing")

        assert response.status_code == 404
        assert response.json() == {
            "error": "resource_not_found",
            "kind": "not_found",
            "details": "Collection 'Missing' not found",
        }

    def test_query_failure(self, client, console_service):
        console_service.list_objects.side_effect = QueryError("Article", "rejected")

        response = client.get("/api/collection/Article")

        assert response.status_code == 500

    def test_unreachable_instance(self, client, console_service):
        console_service.list_objects.side_effect = ConnectivityError("http://alpha:8080", "connection refused")

        response = client.get("/api/collection/Article")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "external_service_error"
        assert body["kind"] == "connectivity_error"
        assert "hint" not in body


class TestDelete:
    def test_delete_objects(self, client, console_service):
        response = client.request("DELETE", "/api/collection/Article", json={"objectIds": [ID_1, ID_2]})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        console_service.delete_objects.assert_awaited_once_with("Article", [ID_1, ID_2], tenant=None)
        console_service.delete_collection.assert_not_called()

    def test_delete_empty_list(self, client, console_service):
        response = client.request("DELETE", "/api/collection/Article", json={"objectIds": []})

        assert response.status_code == 200
        console_service.delete_objects.assert_awaited_once_with("Article", [], tenant=None)

    def test_delete_collection(self, client, console_service):
        response = client.request("DELETE", "/api/collection/Article", json={"deleteCollection": True})

        assert response.status_code == 200
        console_service.delete_collection.assert_awaited_once_with("Article")
        console_service.delete_objects.assert_not_called()

    def test_delete_unknown_collection(self, client, console_service):
        console_service.delete_collection.side_effect = NotFoundError("Missing")

        response = client.request("DELETE", "/api/collection/Missing", json={"deleteCollection": True})

        assert response.status_code == 404

    def test_body_without_target(self, client, console_service):
        response = client.request("DELETE", "/api/collection/Article", json={})

        assert response.status_code == 400
        assert "objectIds or deleteCollection" in response.json()["details"]

    def test_non_uuid_object_id(self, client, console_service):
        response = client.request("DELETE", "/api/collection/Article", json={"objectIds": [ID_1, "id-2"]})

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "validation_error"
        assert "id-2" in body["details"]
        console_service.delete_objects.assert_not_called()

    def test_conflicting_body(self, client, console_service):
        response = client.request(
            "DELETE", "/api/collection/Article", json={"objectIds": [ID_1], "deleteCollection": True}
        )

        assert response.status_code == 400

    def test_delete_failure(self, client, console_service):
        console_service.delete_objects.side_effect = QueryError("Article", "timeout")

        response = client.request("DELETE", "/api/collection/Article", json={"objectIds": [ID_1]})

        assert response.status_code == 500
        assert response.json()["kind"] == "query_error"


class TestTenants:
    def test_list_tenants(self, client, console_service):
        console_service.list_tenants.return_value = [TenantInfo("tenantA", "ACTIVE")]

        response = client.get("/api/collection/Article/tenants")

        assert response.status_code == 200
        assert response.json() == {"tenants": [{"name": "tenantA", "activityStatus": "ACTIVE"}]}

    def test_unknown_collection(self, client, console_service):
        console_service.list_tenants.side_effect = NotFoundError("Missing")

        response = client.get("/api/collection/Missing/tenants")

        assert response.status_code == 404

    def test_multi_tenancy_disabled(self, client, console_service):
        console_service.list_tenants.side_effect = QueryError("Article", "multi-tenancy is not enabled")

        response = client.get("/api/collection/Article/tenants")

        assert response.status_code == 500
