"""Vector index exceptions for Namespace Search."""

from .base import NamespaceSearchError


class VectorIndexError(NamespaceSearchError):
    """Base error for vector index operations."""

    error_code = "NS_VEC_001"


class UpstreamError(VectorIndexError):
    """The vector index service call failed.

    Common causes:
    - Invalid API key or cluster URL
    - Network connectivity issues
    - Index service is down
    """

    error_code = "NS_VEC_002"


class NamespaceNotFoundError(VectorIndexError):
    """Requested namespace does not exist or is not accessible."""

    error_code = "NS_VEC_003"
