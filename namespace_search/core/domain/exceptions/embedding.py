"""Embedding exceptions for Namespace Search."""

from .base import NamespaceSearchError


class EmbeddingError(NamespaceSearchError):
    """Failed to generate a query embedding."""

    error_code = "NS_EMB_001"


class EmbeddingAPIError(EmbeddingError):
    """Embedding API returned an error."""

    error_code = "NS_EMB_002"


class UnsupportedEmbeddingError(EmbeddingError):
    """Embedding response carried neither dense values nor a vector."""

    error_code = "NS_EMB_003"
