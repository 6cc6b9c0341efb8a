"""Port interfaces implemented by outbound adapters."""

from .embedding_port import EmbeddingPort
from .vector_index_port import IndexHandle, Unconfigured, VectorIndexPort, require_index

__all__ = [
    "EmbeddingPort",
    "IndexHandle",
    "Unconfigured",
    "VectorIndexPort",
    "require_index",
]
