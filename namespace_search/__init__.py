"""Namespace Search: semantic search over a namespaced, hosted vector index."""

__version__ = "1.0.0"
