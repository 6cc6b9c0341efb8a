"""Namespace directory use case."""

from __future__ import annotations

import logging

from ..domain import NamespaceDirectory
from ..domain.exceptions import UpstreamError, VectorIndexError
from ..ports.vector_index_port import IndexHandle, require_index

logger = logging.getLogger(__name__)


class NamespaceDirectoryService:
    """Republishes the namespaces of the index and their record counts."""

    def __init__(self, index: IndexHandle) -> None:
        self.index = index

    def list_namespaces(self) -> NamespaceDirectory:
        """List namespaces in the order the index stats report them.

        Raises:
            ServiceUnavailableError: The vector index is not configured, so
                callers can tell that apart from an index with no namespaces.
            UpstreamError: The stats call failed.
        """
        index = require_index(self.index)

        try:
            stats = index.list_namespaces()
        except VectorIndexError:
            raise
        except Exception as e:
            raise UpstreamError("Failed to list namespaces", cause=e) from e

        directory = NamespaceDirectory.from_stats(stats)
        logger.info("Index reports %d namespaces", directory.count)
        return directory
