"""Qdrant vector index with Gemini query embeddings.

Each Qdrant collection is exposed as a namespace, so the same query
pipeline works against a Qdrant cluster. Query embeddings come from the
Google Gemini API (google.genai SDK).
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from qdrant_client import QdrantClient

from ....core.domain import DenseEmbedding, Embedding, Match
from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingError,
    NamespaceNotFoundError,
    UpstreamError,
)
from ....core.ports.embedding_port import EmbeddingPort
from ....core.ports.vector_index_port import DEFAULT_TOP_K, VectorIndexPort

logger = logging.getLogger(__name__)

# Constants
DEFAULT_GEMINI_MODEL = "gemini-embedding-001"
QUERY_TASK_TYPE = "RETRIEVAL_QUERY"


class GeminiEmbedder(EmbeddingPort):
    """Query embeddings using the Google Gemini API."""

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_GEMINI_MODEL,
        timeout: float | None = None,
        client: Any = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> Any:
        """Get or create the genai client."""
        if self._client is None:
            from google import genai

            http_options = {"timeout": int(self.timeout * 1000)} if self.timeout else None
            self._client = genai.Client(api_key=self.api_key, http_options=http_options)
        return self._client

    def embed_query(self, text: str) -> Embedding:
        """Generate the embedding for a single query text."""
        try:
            result = self._get_client().models.embed_content(
                model=self.model_name,
                contents=[text],
                config={"task_type": QUERY_TASK_TYPE},
            )
        except Exception as e:
            raise EmbeddingAPIError(
                "Failed to generate query embedding",
                cause=e,
                context={"model": self.model_name},
            ) from e

        embeddings = getattr(result, "embeddings", None) or []
        values = embeddings[0].values if embeddings else None
        if not values:
            raise EmbeddingError(
                "Failed to generate query embedding",
                context={"model": self.model_name, "reason": "empty response"},
            )
        return DenseEmbedding(values=list(values))


class QdrantAdapter(VectorIndexPort):
    """Qdrant-backed vector index handle where collections act as namespaces."""

    def __init__(
        self,
        url: str,
        api_key: str,
        embedder: EmbeddingPort,
        timeout: float | None = None,
        client: "QdrantClient | None" = None,
    ) -> None:
        """Initialize the Qdrant adapter.

        Args:
            url: Qdrant cluster URL.
            api_key: Qdrant API key (may be empty for local clusters).
            embedder: Provider for query embeddings.
            timeout: Request timeout in seconds.
            client: Pre-built Qdrant client (tests).
        """
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self._embedder = embedder
        self._client = client

    def _get_client(self) -> "QdrantClient":
        """Get or create Qdrant client connection."""
        if not self._client:
            try:
                from qdrant_client import QdrantClient

                self._client = QdrantClient(
                    url=self.url,
                    api_key=self.api_key or None,
                    timeout=int(self.timeout) if self.timeout else None,
                )
                logger.info("Connected to Qdrant at: %s", self.url)
            except Exception as e:
                raise UpstreamError(
                    f"Failed to connect to Qdrant at {self.url}",
                    cause=e,
                    context={"url": self.url},
                ) from e

        return self._client

    def list_namespaces(self) -> dict[str, int]:
        """Return collections and their point counts."""
        client = self._get_client()
        try:
            collections = client.get_collections().collections
            return {
                c.name: int(client.get_collection(c.name).points_count or 0) for c in collections
            }
        except Exception as e:
            raise UpstreamError(
                "Failed to list namespaces",
                cause=e,
                context={"url": self.url},
            ) from e

    def embed(self, text: str) -> list[float]:
        return self._embedder.embed_query(text).as_vector()

    def query(
        self,
        namespace: str,
        vector: list[float],
        top_k: int = DEFAULT_TOP_K,
    ) -> list[Match]:
        """Search the collection named ``namespace``.

        Args:
            namespace: Collection to search.
            vector: Query embedding.
            top_k: Maximum number of matches.

        Returns:
            Matches in the order Qdrant returned them.
        """
        from qdrant_client.http.exceptions import UnexpectedResponse

        client = self._get_client()
        try:
            response = client.query_points(
                collection_name=namespace,
                query=vector,
                limit=top_k,
                with_payload=True,
                with_vectors=False,
            )
        except UnexpectedResponse as e:
            if e.status_code in (403, 404):
                raise NamespaceNotFoundError(
                    f"Namespace '{namespace}' not found or inaccessible",
                    cause=e,
                    context={"namespace": namespace, "url": self.url},
                ) from e
            raise UpstreamError(
                f"Search in namespace '{namespace}' failed",
                cause=e,
                context={"namespace": namespace, "status": e.status_code},
            ) from e
        except Exception as e:
            raise UpstreamError(
                f"Search in namespace '{namespace}' failed",
                cause=e,
                context={"namespace": namespace, "url": self.url},
            ) from e

        return [
            Match(
                score=float(hit.score or 0.0),
                metadata=dict(hit.payload or {}),
                id=str(hit.id) if hit.id is not None else None,
            )
            for hit in response.points
        ]
