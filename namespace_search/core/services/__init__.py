"""Application services."""

from .namespace_directory import NamespaceDirectoryService
from .query_pipeline import QueryPipeline
from .result_formatter import format_match, format_matches, format_relevance

__all__ = [
    "NamespaceDirectoryService",
    "QueryPipeline",
    "format_match",
    "format_matches",
    "format_relevance",
]
