"""Domain models for Namespace Search.

All models are re-exported here for convenient importing:

    from namespace_search.core.domain import Match, NamespaceDirectory
"""

from .models import (
    AlternateEmbedding,
    DenseEmbedding,
    Embedding,
    Match,
    Namespace,
    NamespaceDirectory,
    SearchResults,
)

__all__ = [
    "AlternateEmbedding",
    "DenseEmbedding",
    "Embedding",
    "Match",
    "Namespace",
    "NamespaceDirectory",
    "SearchResults",
]
