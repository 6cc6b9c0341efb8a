"""Embedding Port Interface."""

from abc import ABC, abstractmethod

from ..domain import Embedding


class EmbeddingPort(ABC):
    """Abstract interface for query embedding providers."""

    @abstractmethod
    def embed_query(self, text: str) -> Embedding: ...
