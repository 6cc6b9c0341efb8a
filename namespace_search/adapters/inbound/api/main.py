"""FastAPI application for the Namespace Search API."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .... import __version__
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import (
    InvalidRequestError,
    NamespaceSearchError,
    ServiceUnavailableError,
)
from ....core.ports.vector_index_port import require_index
from ...common.exception_handler import (
    format_error_response,
    get_http_status_code,
    get_log_level,
    log_exception,
)
from .routers import health, namespaces, search

setup_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

# Shows structured error details (type, location, trace) in responses
DEBUG_MODE = settings.debug

app = FastAPI(
    title="Namespace Search API",
    description=(
        "Semantic search over a namespaced vector index. "
        "Embeds the query, searches one namespace and returns formatted matches."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(namespaces.router)
app.include_router(search.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(NamespaceSearchError)
async def namespace_search_error_handler(
    request: Request, exc: NamespaceSearchError
) -> JSONResponse:
    """Handle all NamespaceSearchError exceptions with a JSON error body.

    Args:
        request: The incoming request.
        exc: The NamespaceSearchError exception.

    Returns:
        JSONResponse with ``error`` and ``code`` (plus ``detail`` in debug mode).
    """
    log_exception(
        exc,
        level=get_log_level(exc),
        extra_context={"path": str(request.url.path), "method": request.method},
    )

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=format_error_response(exc, include_detail=DEBUG_MODE),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report an unparseable search body like a missing query or namespace.

    A missing configuration is still reported first, as it is for a
    well-formed request.
    """
    if request.url.path == "/search":
        try:
            require_index(search.get_query_pipeline().index)
        except ServiceUnavailableError as unavailable:
            return await namespace_search_error_handler(request, unavailable)

    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    error = InvalidRequestError(
        "Query and namespace are required",
        context={"invalid_fields": fields},
    )
    return await namespace_search_error_handler(request, error)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions as an internal server error.

    Args:
        request: The incoming request.
        exc: The unhandled exception.

    Returns:
        JSONResponse with a generic error body.
    """
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    return JSONResponse(
        status_code=500,
        content=format_error_response(exc, include_detail=DEBUG_MODE),
    )


# =============================================================================
# Lifecycle Events
# =============================================================================


@app.on_event("startup")
async def startup_event():
    """Log the active configuration on startup."""
    logger.info("Namespace Search API starting up...")
    logger.info("Vector backend: %s", settings.vector_backend)
    logger.info("API docs available at /docs")
    logger.info("Debug mode: %s", "ENABLED" if DEBUG_MODE else "DISABLED")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Namespace Search API shutting down...")


# Export for uvicorn
__all__ = ["app"]
