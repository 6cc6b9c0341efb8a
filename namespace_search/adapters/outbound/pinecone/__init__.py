"""Pinecone index and inference adapter."""

from .pinecone_adapter import PineconeAdapter, PineconeInferenceEmbedder, parse_embedding

__all__ = ["PineconeAdapter", "PineconeInferenceEmbedder", "parse_embedding"]
