"""Composition root wiring the configured vector index into the services."""

from __future__ import annotations

import logging

from ..config.settings import Settings
from ..core.ports.vector_index_port import IndexHandle, Unconfigured
from ..core.services.namespace_directory import NamespaceDirectoryService
from ..core.services.query_pipeline import QueryPipeline

logger = logging.getLogger(__name__)


def build_vector_index(settings: Settings) -> IndexHandle:
    """Build the vector index for the configured backend.

    Returns ``Unconfigured`` instead of raising when a credential is absent,
    so the services can report it per request.
    """
    missing = settings.missing_credentials()
    if missing:
        logger.warning("Vector index unavailable: %s", missing)
        return Unconfigured(reason=missing, backend=settings.vector_backend)

    if settings.vector_backend == "qdrant":
        from ..adapters.outbound.qdrant import GeminiEmbedder, QdrantAdapter

        logger.info("Initializing QdrantAdapter...")
        embedder = GeminiEmbedder(
            api_key=settings.google_api_key,
            model_name=settings.gemini_embedding_model,
            timeout=settings.request_timeout,
        )
        return QdrantAdapter(
            url=settings.qdrant_url,
            api_key=settings.qdrant_api_key,
            embedder=embedder,
            timeout=settings.request_timeout,
        )

    from ..adapters.outbound.pinecone import PineconeAdapter

    logger.info("Initializing PineconeAdapter for index '%s'...", settings.index_name)
    return PineconeAdapter(
        api_key=settings.pinecone_api_key,
        index_name=settings.index_name,
        embedding_model=settings.embedding_model,
        timeout=settings.request_timeout,
    )


def build_query_pipeline(index: IndexHandle, settings: Settings) -> QueryPipeline:
    return QueryPipeline(
        index,
        top_k=settings.top_k,
        escape_metadata=settings.escape_metadata,
    )


def build_namespace_directory(index: IndexHandle) -> NamespaceDirectoryService:
    return NamespaceDirectoryService(index)
