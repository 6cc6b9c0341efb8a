"""FastAPI dependency wiring for Namespace Search."""

import logging
from functools import lru_cache

from ....composition.container import (
    build_namespace_directory,
    build_query_pipeline,
    build_vector_index,
)
from ....config.settings import settings
from ....core.ports.vector_index_port import IndexHandle
from ....core.services.namespace_directory import NamespaceDirectoryService
from ....core.services.query_pipeline import QueryPipeline

logger = logging.getLogger(__name__)


@lru_cache
def get_vector_index() -> IndexHandle:
    """Get or create the vector index handle singleton."""
    logger.info("Initializing vector index (%s)...", settings.vector_backend)
    return build_vector_index(settings)


@lru_cache
def get_query_pipeline() -> QueryPipeline:
    """Get or create the QueryPipeline singleton."""
    return build_query_pipeline(get_vector_index(), settings)


@lru_cache
def get_namespace_directory() -> NamespaceDirectoryService:
    """Get or create the NamespaceDirectoryService singleton."""
    return build_namespace_directory(get_vector_index())
