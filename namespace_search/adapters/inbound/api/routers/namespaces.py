"""Namespace directory endpoint."""

import logging

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from ..deps import get_namespace_directory
from ..models import ErrorResponse, NamespacesResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["namespaces"])


@router.get(
    "/namespaces",
    response_model=NamespacesResponse,
    responses={500: {"model": ErrorResponse, "description": "Index unconfigured or unreachable"}},
)
async def list_namespaces() -> NamespacesResponse:
    """List the namespaces of the index with their record counts.

    Returns:
        NamespacesResponse with names in index order, counts and total.
    """
    directory = await run_in_threadpool(get_namespace_directory().list_namespaces)

    return NamespacesResponse(
        namespaces=directory.namespaces,
        namespace_stats=directory.namespace_stats,
        count=directory.count,
    )
