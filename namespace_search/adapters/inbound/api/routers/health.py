"""Health check endpoints."""

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from ..... import __version__
from ..deps import get_namespace_directory
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        HealthResponse with current status and version.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        vector_index="not_checked",
    )


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness probe.

    Checks that the vector index is configured and reachable.

    Returns:
        HealthResponse with detailed status.
    """
    try:
        directory = await run_in_threadpool(get_namespace_directory().list_namespaces)
        total = sum(directory.namespace_stats.values())
        index_status = f"connected ({directory.count} namespaces, {total} records)"
    except Exception as e:
        index_status = f"error: {e}"

    return HealthResponse(
        status="ready",
        version=__version__,
        vector_index=index_status,
    )
