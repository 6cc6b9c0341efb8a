"""Namespace-scoped semantic search use case."""

from __future__ import annotations

import logging

from ..domain import SearchResults
from ..domain.exceptions import (
    EmbeddingError,
    InvalidRequestError,
    UpstreamError,
    VectorIndexError,
)
from ..domain.utils import clean_text, is_blank
from ..ports.vector_index_port import DEFAULT_TOP_K, IndexHandle, require_index
from .result_formatter import format_matches

logger = logging.getLogger(__name__)


class QueryPipeline:
    """Turns a raw user query into ranked, rendered results for one namespace.

    Steps: check configuration, validate input, embed the query, run the
    similarity search in the namespace, render every match. Nothing is
    retried or cached; every call re-embeds and re-queries.
    """

    def __init__(
        self,
        index: IndexHandle,
        *,
        top_k: int = DEFAULT_TOP_K,
        escape_metadata: bool = True,
    ) -> None:
        self.index = index
        self.top_k = top_k
        self.escape_metadata = escape_metadata

    def search(self, query: str | None, namespace: str | None) -> SearchResults:
        """Search ``namespace`` for ``query``.

        Args:
            query: Free-text query. Must be non-blank.
            namespace: Namespace to search. Must be non-blank.

        Returns:
            SearchResults with one HTML fragment per match, in upstream order.

        Raises:
            ServiceUnavailableError: The vector index is not configured.
            InvalidRequestError: Query or namespace is missing.
            EmbeddingError: The query could not be embedded.
            NamespaceNotFoundError: The namespace is missing or inaccessible.
            UpstreamError: Any other failure of the search call.
        """
        index = require_index(self.index)

        clean_query = clean_text(query).strip()
        if is_blank(clean_query) or is_blank(namespace):
            raise InvalidRequestError(
                "Query and namespace are required",
                context={
                    "query_present": bool(clean_query),
                    "namespace_present": not is_blank(namespace),
                },
            )

        logger.info("Searching namespace '%s' (query length %d)", namespace, len(clean_query))

        try:
            vector = index.embed(clean_query)
        except EmbeddingError:
            raise
        except Exception as e:
            raise EmbeddingError(
                "Failed to generate query embedding",
                cause=e,
                context={"namespace": namespace},
            ) from e
        logger.debug("Generated embedding for query, dimension: %d", len(vector))

        try:
            matches = index.query(namespace, vector, top_k=self.top_k)
        except VectorIndexError:
            raise
        except Exception as e:
            raise UpstreamError(
                f"Search in namespace '{namespace}' failed",
                cause=e,
                context={"namespace": namespace},
            ) from e

        logger.info("Namespace '%s' returned %d matches", namespace, len(matches))

        return SearchResults(
            results=format_matches(matches, escape=self.escape_metadata),
            query=query,
            namespace=namespace,
        )
