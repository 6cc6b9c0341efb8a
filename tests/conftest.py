"""
Pytest configuration and shared fixtures.
"""

import pytest

from namespace_search.core.domain import Match
from namespace_search.core.ports.vector_index_port import VectorIndexPort


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (in-process API)")


class FakeVectorIndex(VectorIndexPort):
    """In-memory vector index that records every call."""

    def __init__(
        self,
        stats: dict[str, int] | None = None,
        matches: list[Match] | None = None,
        vector: list[float] | None = None,
        embed_error: Exception | None = None,
        query_error: Exception | None = None,
        stats_error: Exception | None = None,
    ) -> None:
        self.stats = stats if stats is not None else {}
        self.matches = matches if matches is not None else []
        self.vector = vector if vector is not None else [0.1, 0.2, 0.3]
        self.embed_error = embed_error
        self.query_error = query_error
        self.stats_error = stats_error
        self.calls: list[tuple] = []

    def list_namespaces(self) -> dict[str, int]:
        self.calls.append(("list_namespaces",))
        if self.stats_error:
            raise self.stats_error
        return dict(self.stats)

    def embed(self, text: str) -> list[float]:
        self.calls.append(("embed", text))
        if self.embed_error:
            raise self.embed_error
        return list(self.vector)

    def query(self, namespace: str, vector: list[float], top_k: int = 10) -> list[Match]:
        self.calls.append(("query", namespace, tuple(vector), top_k))
        if self.query_error:
            raise self.query_error
        return list(self.matches)


@pytest.fixture
def fake_index():
    """Factory for FakeVectorIndex instances."""
    return FakeVectorIndex


@pytest.fixture
def full_match():
    """Match carrying every rendered metadata field."""
    return Match(
        score=0.873,
        metadata={"text": "Hello", "title": "T", "url": "http://x", "source": "S"},
        id="rec-1",
    )


@pytest.fixture
def sample_matches():
    """Three matches in upstream order, deliberately not sorted by score."""
    return [
        Match(score=0.42, metadata={"text": "second best"}, id="b"),
        Match(score=0.91, metadata={"title": "Top"}, id="a"),
        Match(score=0.10, metadata={}, id="c"),
    ]
