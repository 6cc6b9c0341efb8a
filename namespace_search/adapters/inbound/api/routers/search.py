"""Search endpoint."""

import logging

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from ..deps import get_query_pipeline
from ..models import ErrorResponse, SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Query or namespace missing"},
        404: {"model": ErrorResponse, "description": "Namespace not found or inaccessible"},
        500: {"model": ErrorResponse, "description": "Embedding, configuration or index error"},
    },
)
async def search(request: SearchRequest) -> SearchResponse:
    """Search a namespace and return the matches as HTML fragments.

    Args:
        request: The query and the namespace to search.

    Returns:
        SearchResponse with one fragment per match, in relevance order.
    """
    pipeline = get_query_pipeline()
    results = await run_in_threadpool(pipeline.search, request.query, request.namespace)

    return SearchResponse(
        results=results.results,
        count=results.count,
        query=results.query,
        namespace=results.namespace,
    )
