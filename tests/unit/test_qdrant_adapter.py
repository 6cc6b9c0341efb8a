"""Unit tests for the Qdrant adapter and Gemini embedder.

Both SDK clients are injected as mocks to avoid network calls.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from qdrant_client.http.exceptions import UnexpectedResponse

from namespace_search.adapters.outbound.qdrant import GeminiEmbedder, QdrantAdapter
from namespace_search.core.domain import DenseEmbedding
from namespace_search.core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingError,
    NamespaceNotFoundError,
    UpstreamError,
)

pytestmark = pytest.mark.unit


def _unexpected(status: int) -> UnexpectedResponse:
    return UnexpectedResponse(status, "error", b"{}", httpx.Headers())


class TestGeminiEmbedder:
    @pytest.fixture
    def genai_client(self):
        client = MagicMock()
        client.models.embed_content.return_value = SimpleNamespace(
            embeddings=[SimpleNamespace(values=[0.1] * 8)]
        )
        return client

    def test_embed_query_uses_retrieval_query_task(self, genai_client):
        embedder = GeminiEmbedder("fake-api-key", client=genai_client)

        embedding = embedder.embed_query("test query")

        genai_client.models.embed_content.assert_called_once_with(
            model="gemini-embedding-001",
            contents=["test query"],
            config={"task_type": "RETRIEVAL_QUERY"},
        )
        assert isinstance(embedding, DenseEmbedding)
        assert len(embedding.as_vector()) == 8

    def test_api_failure(self, genai_client):
        genai_client.models.embed_content.side_effect = RuntimeError("403")

        with pytest.raises(EmbeddingAPIError):
            GeminiEmbedder("fake-api-key", client=genai_client).embed_query("q")

    def test_empty_response(self, genai_client):
        genai_client.models.embed_content.return_value = SimpleNamespace(embeddings=[])

        with pytest.raises(EmbeddingError):
            GeminiEmbedder("fake-api-key", client=genai_client).embed_query("q")


class TestQdrantAdapter:
    @pytest.fixture
    def mock_qdrant_client(self):
        return MagicMock()

    @pytest.fixture
    def embedder(self):
        embedder = MagicMock()
        embedder.embed_query.return_value = DenseEmbedding(values=[0.3, 0.4])
        return embedder

    @pytest.fixture
    def adapter(self, mock_qdrant_client, embedder):
        return QdrantAdapter(
            url="https://test.cloud.qdrant.io",
            api_key="test-key",
            embedder=embedder,
            client=mock_qdrant_client,
        )

    def test_list_namespaces_maps_collections(self, adapter, mock_qdrant_client):
        mock_qdrant_client.get_collections.return_value.collections = [
            SimpleNamespace(name="docs"),
            SimpleNamespace(name="faq"),
        ]
        counts = {"docs": 100, "faq": None}
        mock_qdrant_client.get_collection.side_effect = lambda name: SimpleNamespace(
            points_count=counts[name]
        )

        assert adapter.list_namespaces() == {"docs": 100, "faq": 0}

    def test_list_namespaces_failure(self, adapter, mock_qdrant_client):
        mock_qdrant_client.get_collections.side_effect = _unexpected(401)

        with pytest.raises(UpstreamError):
            adapter.list_namespaces()

    def test_embed(self, adapter, embedder):
        assert adapter.embed("q") == [0.3, 0.4]
        embedder.embed_query.assert_called_once_with("q")

    def test_query(self, adapter, mock_qdrant_client):
        mock_qdrant_client.query_points.return_value = SimpleNamespace(
            points=[
                SimpleNamespace(id=7, score=0.8, payload={"text": "hit", "url": "http://x"}),
                SimpleNamespace(id="uuid-1", score=0.5, payload=None),
            ]
        )

        matches = adapter.query("docs", [0.3, 0.4], top_k=2)

        mock_qdrant_client.query_points.assert_called_once_with(
            collection_name="docs",
            query=[0.3, 0.4],
            limit=2,
            with_payload=True,
            with_vectors=False,
        )
        assert [m.id for m in matches] == ["7", "uuid-1"]
        assert matches[0].metadata["url"] == "http://x"
        assert matches[1].metadata == {}

    def test_missing_collection_is_namespace_not_found(self, adapter, mock_qdrant_client):
        mock_qdrant_client.query_points.side_effect = _unexpected(404)

        with pytest.raises(NamespaceNotFoundError):
            adapter.query("missing", [0.1])

    def test_server_error_is_upstream_error(self, adapter, mock_qdrant_client):
        mock_qdrant_client.query_points.side_effect = _unexpected(500)

        with pytest.raises(UpstreamError) as exc_info:
            adapter.query("docs", [0.1])

        assert exc_info.value.extra_context["status"] == 500

    def test_connection_error_is_upstream_error(self, adapter, mock_qdrant_client):
        mock_qdrant_client.query_points.side_effect = ConnectionError("refused")

        with pytest.raises(UpstreamError):
            adapter.query("docs", [0.1])
