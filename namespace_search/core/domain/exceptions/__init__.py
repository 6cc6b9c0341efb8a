"""Custom exception hierarchy for Namespace Search.

This package provides structured exceptions with automatic context capture.
Each exception includes:
- Error codes for quick identification
- Automatic capture of class, method, file, and line number
- Cause chaining for underlying exceptions
- JSON serialization for structured logging

Import from this package directly:

    from namespace_search.core.domain.exceptions import NamespaceNotFoundError
"""

# Base classes
from .base import ExceptionContext, NamespaceSearchError

# Configuration exceptions
from .configuration import ConfigurationError, ServiceUnavailableError

# Embedding exceptions
from .embedding import (
    EmbeddingAPIError,
    EmbeddingError,
    UnsupportedEmbeddingError,
)

# Validation exceptions
from .validation import InvalidRequestError, ValidationError

# Vector index exceptions
from .vector_index import (
    NamespaceNotFoundError,
    UpstreamError,
    VectorIndexError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "NamespaceSearchError",
    # Configuration
    "ConfigurationError",
    "ServiceUnavailableError",
    # Embedding
    "EmbeddingError",
    "EmbeddingAPIError",
    "UnsupportedEmbeddingError",
    # Validation
    "ValidationError",
    "InvalidRequestError",
    # Vector index
    "VectorIndexError",
    "UpstreamError",
    "NamespaceNotFoundError",
]
