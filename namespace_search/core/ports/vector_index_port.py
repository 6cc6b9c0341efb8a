"""Vector Index Port Interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..domain import Match
from ..domain.exceptions import ServiceUnavailableError

DEFAULT_TOP_K = 10


class VectorIndexPort(ABC):
    """Abstract handle to a managed vector index scoped to one index."""

    @abstractmethod
    def list_namespaces(self) -> dict[str, int]:
        """Return namespace names mapped to record counts, in service order."""
        ...

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Embed query text into a plain vector."""
        ...

    @abstractmethod
    def query(self, namespace: str, vector: list[float], top_k: int = DEFAULT_TOP_K) -> list[Match]:
        """Similarity search scoped to ``namespace``, metadata included."""
        ...


@dataclass(frozen=True)
class Unconfigured:
    """Stands in for a vector index whose credentials are absent.

    Attributes:
        reason: Message surfaced to callers, e.g. "Pinecone API key not configured".
    """

    reason: str
    backend: str = ""


IndexHandle = VectorIndexPort | Unconfigured


def require_index(handle: IndexHandle) -> VectorIndexPort:
    """Return the configured index or raise ServiceUnavailableError."""
    if isinstance(handle, Unconfigured):
        raise ServiceUnavailableError(handle.reason, context={"backend": handle.backend})
    return handle
