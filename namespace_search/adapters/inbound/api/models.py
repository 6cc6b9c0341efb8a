"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """Request model for a namespace search.

    Both fields are optional at the schema level so that a missing value is
    reported as a 400 with the same message as a blank one.
    """

    query: str | None = Field(
        None,
        description="Free-text search query",
        json_schema_extra={"example": "How do I reset my password?"},
    )
    namespace: str | None = Field(
        None,
        description="Namespace (content partition) to search",
        json_schema_extra={"example": "docs"},
    )


class SearchResponse(BaseModel):
    """Response model for a namespace search."""

    results: list[str] = Field(
        default_factory=list,
        description="HTML fragments, one per match, in relevance order",
    )
    count: int = Field(..., ge=0, description="Number of results")
    query: str = Field(..., description="The query that was searched")
    namespace: str = Field(..., description="The namespace that was searched")


class NamespacesResponse(BaseModel):
    """Response model for the namespace directory."""

    model_config = ConfigDict(populate_by_name=True)

    namespaces: list[str] = Field(default_factory=list, description="Namespace names")
    namespace_stats: dict[str, int] = Field(
        default_factory=dict,
        alias="namespaceStats",
        description="Record count per namespace",
    )
    count: int = Field(..., ge=0, description="Number of namespaces")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    vector_index: str = Field(..., description="Vector index backend status")


class ErrorResponse(BaseModel):
    """Response model for errors.

    Example:
        {"error": "Namespace 'docs' not found or inaccessible", "code": "NS_VEC_003"}
    """

    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Error code (e.g., NS_VEC_003)")
    detail: dict | None = Field(None, description="Structured error details (debug mode only)")
