"""Pinecone vector index with Pinecone hosted inference for query embeddings.

The adapter is scoped to a single index. Namespaces are Pinecone namespaces
and query embeddings come from Pinecone's inference API, so the query is
embedded by the same model family that embedded the records.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pinecone import Pinecone

from ....core.domain import AlternateEmbedding, DenseEmbedding, Embedding, Match
from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingError,
    NamespaceNotFoundError,
    UnsupportedEmbeddingError,
    UpstreamError,
)
from ....core.ports.embedding_port import EmbeddingPort
from ....core.ports.vector_index_port import DEFAULT_TOP_K, VectorIndexPort

logger = logging.getLogger(__name__)

# Constants
DEFAULT_INDEX_NAME = "ycaisus"
DEFAULT_EMBEDDING_MODEL = "multilingual-e5-large"
QUERY_EMBED_PARAMETERS = {"input_type": "query", "truncate": "END"}


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from an SDK model or a plain mapping."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def parse_embedding(item: Any) -> Embedding:
    """Resolve one inference result into a tagged embedding.

    Dense results carry ``values``; some model responses carry ``vector``
    instead. Anything else (sparse-only results, empty payloads) is rejected.
    """
    values = _field(item, "values")
    if values:
        return DenseEmbedding(values=list(values))

    vector = _field(item, "vector")
    if vector:
        return AlternateEmbedding(vector=list(vector))

    raise UnsupportedEmbeddingError(
        "Unsupported embedding format",
        context={"vector_type": str(_field(item, "vector_type") or "unknown")},
    )


class PineconeInferenceEmbedder(EmbeddingPort):
    """Query embeddings from Pinecone's hosted inference API."""

    def __init__(self, client: "Pinecone", model_name: str = DEFAULT_EMBEDDING_MODEL):
        self._client = client
        self.model_name = model_name

    def embed_query(self, text: str) -> Embedding:
        """Embed a single query with ``input_type=query`` and ``truncate=END``."""
        try:
            response = self._client.inference.embed(
                model=self.model_name,
                inputs=[text],
                parameters=QUERY_EMBED_PARAMETERS,
            )
        except Exception as e:
            raise EmbeddingAPIError(
                "Failed to generate query embedding",
                cause=e,
                context={"model": self.model_name},
            ) from e

        data = _field(response, "data")
        if not data:
            raise EmbeddingError(
                "Failed to generate query embedding",
                context={"model": self.model_name, "reason": "empty response"},
            )

        return parse_embedding(data[0])


class PineconeAdapter(VectorIndexPort):
    """Pinecone-backed vector index handle.

    Builds the SDK client lazily on first use; the client and index handles
    are reused across requests and hold no per-request state.
    """

    def __init__(
        self,
        api_key: str,
        index_name: str = DEFAULT_INDEX_NAME,
        embedding_model: str = DEFAULT_EMBEDDING_MODEL,
        timeout: float | None = None,
        client: "Pinecone | None" = None,
    ) -> None:
        """Initialize the Pinecone adapter.

        Args:
            api_key: Pinecone API key.
            index_name: Name of the index every operation is scoped to.
            embedding_model: Hosted inference model for query embeddings.
            timeout: Per-request timeout in seconds for index and inference calls.
            client: Pre-built Pinecone client (tests, custom hosts).
        """
        self.api_key = api_key
        self.index_name = index_name
        self.embedding_model = embedding_model
        self.timeout = timeout
        self._client = client
        self._index: Any = None
        self._embedder: PineconeInferenceEmbedder | None = None

    def _get_client(self) -> "Pinecone":
        """Get or create the Pinecone client."""
        if self._client is None:
            try:
                from pinecone import Pinecone

                client_kwargs = {"timeout": self.timeout} if self.timeout else {}
                self._client = Pinecone(api_key=self.api_key, **client_kwargs)
            except Exception as e:
                raise UpstreamError(
                    "Failed to initialize Pinecone client",
                    cause=e,
                    context={"index": self.index_name},
                ) from e
        return self._client

    def _get_index(self) -> Any:
        """Get or create the handle to the configured index."""
        if self._index is None:
            self._index = self._get_client().Index(self.index_name)
            logger.info("Using Pinecone index: %s", self.index_name)
        return self._index

    def _get_embedder(self) -> PineconeInferenceEmbedder:
        if self._embedder is None:
            self._embedder = PineconeInferenceEmbedder(self._get_client(), self.embedding_model)
        return self._embedder

    def _request_kwargs(self) -> dict[str, Any]:
        return {"timeout": self.timeout} if self.timeout else {}

    def list_namespaces(self) -> dict[str, int]:
        """Return namespace record counts from the index stats.

        Returns:
            Mapping of namespace name to record count, in stats order.
        """
        try:
            stats = self._get_index().describe_index_stats(**self._request_kwargs())
        except UpstreamError:
            raise
        except Exception as e:
            raise UpstreamError(
                "Failed to list namespaces",
                cause=e,
                context={"index": self.index_name},
            ) from e

        namespaces = _field(stats, "namespaces") or {}
        logger.debug("Index stats for %s: %d namespaces", self.index_name, len(namespaces))
        return {
            name: int(_field(summary, "vector_count") or 0)
            for name, summary in namespaces.items()
        }

    def embed(self, text: str) -> list[float]:
        """Embed query text and return a plain vector."""
        embedding = self._get_embedder().embed_query(text)
        vector = embedding.as_vector()
        logger.debug("Generated %s embedding, dimension: %d", type(embedding).__name__, len(vector))
        return vector

    def query(
        self,
        namespace: str,
        vector: list[float],
        top_k: int = DEFAULT_TOP_K,
    ) -> list[Match]:
        """Search one namespace for the nearest records.

        Args:
            namespace: Namespace to search.
            vector: Query embedding.
            top_k: Maximum number of matches.

        Returns:
            Matches in the order Pinecone returned them.
        """
        from pinecone.exceptions import ForbiddenException, NotFoundException

        try:
            response = self._get_index().query(
                namespace=namespace,
                vector=vector,
                top_k=top_k,
                include_metadata=True,
                include_values=False,
                **self._request_kwargs(),
            )
        except (NotFoundException, ForbiddenException) as e:
            raise NamespaceNotFoundError(
                f"Namespace '{namespace}' not found or inaccessible",
                cause=e,
                context={"namespace": namespace, "index": self.index_name},
            ) from e
        except UpstreamError:
            raise
        except Exception as e:
            raise UpstreamError(
                f"Search in namespace '{namespace}' failed",
                cause=e,
                context={"namespace": namespace, "index": self.index_name},
            ) from e

        return [
            Match(
                score=float(_field(hit, "score") or 0.0),
                metadata=dict(_field(hit, "metadata") or {}),
                id=_field(hit, "id"),
            )
            for hit in _field(response, "matches") or []
        ]
