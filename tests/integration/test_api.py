"""Integration tests for FastAPI endpoints.

The services run for real on top of an in-memory vector index; only the
dependency accessors are patched.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from namespace_search.core.domain import Match
from namespace_search.core.domain.exceptions import (
    EmbeddingAPIError,
    NamespaceNotFoundError,
    UpstreamError,
)
from namespace_search.core.ports.vector_index_port import Unconfigured
from namespace_search.core.services.namespace_directory import NamespaceDirectoryService
from namespace_search.core.services.query_pipeline import QueryPipeline

pytestmark = pytest.mark.integration

ROUTERS = "namespace_search.adapters.inbound.api.routers"


@pytest.fixture
def make_client():
    """Build a TestClient whose services run over the given index handle."""
    patches = []

    def _make(index, raise_server_exceptions=True):
        pipeline = QueryPipeline(index)
        directory = NamespaceDirectoryService(index)
        for target, value in (
            (f"{ROUTERS}.search.get_query_pipeline", pipeline),
            (f"{ROUTERS}.namespaces.get_namespace_directory", directory),
            (f"{ROUTERS}.health.get_namespace_directory", directory),
        ):
            p = patch(target, return_value=value)
            p.start()
            patches.append(p)

        from namespace_search.adapters.inbound.api.main import app

        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make

    for p in patches:
        p.stop()


class TestHealthEndpoints:
    def test_health_check(self, make_client, fake_index):
        response = make_client(fake_index()).get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_check(self, make_client, fake_index):
        response = make_client(fake_index(stats={"a": 3, "b": 4})).get("/ready")

        assert response.status_code == 200
        assert response.json()["vector_index"] == "connected (2 namespaces, 7 records)"

    def test_readiness_reports_missing_configuration(self, make_client):
        response = make_client(Unconfigured("Pinecone API key not configured")).get("/ready")

        assert response.status_code == 200
        assert response.json()["vector_index"] == "error: Pinecone API key not configured"


class TestNamespacesEndpoint:
    def test_list_namespaces(self, make_client, fake_index):
        response = make_client(fake_index(stats={"a": 3, "b": 0})).get("/namespaces")

        assert response.status_code == 200
        assert response.json() == {
            "namespaces": ["a", "b"],
            "namespaceStats": {"a": 3, "b": 0},
            "count": 2,
        }

    def test_unconfigured(self, make_client):
        response = make_client(Unconfigured("Pinecone API key not configured")).get(
            "/namespaces"
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Pinecone API key not configured",
            "code": "NS_CFG_002",
        }

    def test_upstream_failure(self, make_client, fake_index):
        index = fake_index(stats_error=RuntimeError("boom"))

        response = make_client(index).get("/namespaces")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to list namespaces"
        assert response.json()["code"] == "NS_VEC_002"


class TestSearchEndpoint:
    def test_search_success(self, make_client, fake_index, full_match):
        index = fake_index(matches=[full_match, Match(score=0.5)])

        response = make_client(index).post("/search", json={"query": "hi", "namespace": "docs"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["query"] == "hi"
        assert data["namespace"] == "docs"
        assert "87.3%" in data["results"][0]
        assert 'href="http://x"' in data["results"][0]
        assert data["results"][1] == (
            '<div class="text-xs text-gray-600">Relevance Score: 50.0%</div>'
        )

    @pytest.mark.parametrize(
        "body",
        [{}, {"query": "hi"}, {"namespace": "docs"}, {"query": "", "namespace": "docs"}],
    )
    def test_missing_fields(self, make_client, fake_index, body):
        index = fake_index()

        response = make_client(index).post("/search", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Query and namespace are required"
        assert index.calls == []

    def test_missing_body(self, make_client, fake_index):
        index = fake_index()

        response = make_client(index).post("/search")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Query and namespace are required",
            "code": "NS_VAL_002",
        }
        assert index.calls == []

    def test_invalid_json_body(self, make_client, fake_index):
        response = make_client(fake_index()).post(
            "/search",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "NS_VAL_002"

    def test_non_string_field(self, make_client, fake_index):
        response = make_client(fake_index()).post(
            "/search", json={"query": 5, "namespace": "docs"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Query and namespace are required",
            "code": "NS_VAL_002",
        }

    def test_unconfigured_wins_over_malformed_body(self, make_client):
        response = make_client(Unconfigured("Pinecone API key not configured")).post(
            "/search", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 500
        assert response.json()["code"] == "NS_CFG_002"

    def test_unconfigured_wins_over_validation(self, make_client):
        response = make_client(Unconfigured("Pinecone API key not configured")).post(
            "/search", json={}
        )

        assert response.status_code == 500
        assert response.json()["code"] == "NS_CFG_002"

    def test_namespace_not_found(self, make_client, fake_index):
        index = fake_index(
            query_error=NamespaceNotFoundError("Namespace 'nope' not found or inaccessible")
        )

        response = make_client(index).post("/search", json={"query": "q", "namespace": "nope"})

        assert response.status_code == 404
        assert response.json() == {
            "error": "Namespace 'nope' not found or inaccessible",
            "code": "NS_VEC_003",
        }

    def test_embedding_failure(self, make_client, fake_index):
        index = fake_index(embed_error=EmbeddingAPIError("Failed to generate query embedding"))

        response = make_client(index).post("/search", json={"query": "q", "namespace": "ns"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to generate query embedding"

    def test_upstream_failure(self, make_client, fake_index):
        index = fake_index(query_error=UpstreamError("Search in namespace 'ns' failed"))

        response = make_client(index).post("/search", json={"query": "q", "namespace": "ns"})

        assert response.status_code == 500
        assert response.json()["code"] == "NS_VEC_002"

    def test_unclassified_error(self, make_client, fake_index):
        client = make_client(fake_index(), raise_server_exceptions=False)

        with patch(f"{ROUTERS}.search.get_query_pipeline", side_effect=KeyError("secret")):
            response = client.post("/search", json={"query": "q", "namespace": "ns"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "code": "PYTHON_ERR"}


class TestAPIDocumentation:
    def test_openapi_docs(self, make_client, fake_index):
        assert make_client(fake_index()).get("/docs").status_code == 200

    def test_openapi_schema_lists_routes(self, make_client, fake_index):
        paths = make_client(fake_index()).get("/openapi.json").json()["paths"]

        assert "/search" in paths
        assert "/namespaces" in paths
