"""Configuration-related exceptions for Namespace Search."""

from .base import NamespaceSearchError


class ConfigurationError(NamespaceSearchError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "NS_CFG_001"


class ServiceUnavailableError(ConfigurationError):
    """The vector index credential is not configured."""

    error_code = "NS_CFG_002"
