"""Validation exceptions for Namespace Search."""

from .base import NamespaceSearchError


class ValidationError(NamespaceSearchError):
    """Input validation failed."""

    error_code = "NS_VAL_001"


class InvalidRequestError(ValidationError):
    """Query or namespace is missing or blank."""

    error_code = "NS_VAL_002"
