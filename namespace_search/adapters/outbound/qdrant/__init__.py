"""Qdrant index adapter with Gemini embeddings."""

from .qdrant_adapter import GeminiEmbedder, QdrantAdapter

__all__ = ["GeminiEmbedder", "QdrantAdapter"]
