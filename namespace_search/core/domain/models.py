"""Domain models for namespace-scoped vector search."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Namespace:
    """A named partition of the vector index.

    Attributes:
        name: Namespace identifier, unique within the index.
        record_count: Approximate number of records reported by the service.
    """

    name: str
    record_count: int = 0


@dataclass(frozen=True)
class DenseEmbedding:
    """Embedding returned as a dense ``values`` array."""

    values: list[float]

    def as_vector(self) -> list[float]:
        return [float(v) for v in self.values]


@dataclass(frozen=True)
class AlternateEmbedding:
    """Embedding returned under a ``vector`` field instead of ``values``."""

    vector: list[float]

    def as_vector(self) -> list[float]:
        return [float(v) for v in self.vector]


Embedding = DenseEmbedding | AlternateEmbedding


@dataclass
class Match:
    """One similarity-search hit.

    Attributes:
        score: Similarity score, usually within [0, 1]. Not clamped.
        metadata: Record metadata (``text``, ``title``, ``url``, ``source``...).
        id: Record identifier, when the service returns one.
    """

    score: float
    metadata: dict[str, Any] = field(default_factory=dict)
    id: str | None = None


@dataclass
class NamespaceDirectory:
    """Namespaces of the index with their record counts."""

    namespaces: list[str]
    namespace_stats: dict[str, int]

    @property
    def count(self) -> int:
        return len(self.namespaces)

    @classmethod
    def from_stats(cls, stats: dict[str, int]) -> "NamespaceDirectory":
        """Build a directory keeping the iteration order of ``stats``."""
        return cls(namespaces=list(stats), namespace_stats=dict(stats))

    def to_namespaces(self) -> list[Namespace]:
        return [Namespace(name, self.namespace_stats.get(name, 0)) for name in self.namespaces]


@dataclass
class SearchResults:
    """Formatted results for one query, in upstream order."""

    results: list[str]
    query: str
    namespace: str

    @property
    def count(self) -> int:
        return len(self.results)
