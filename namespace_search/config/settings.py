"""Configuration management for Namespace Search."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets copied from dashboards or injected by hosting platforms may
    contain BOM characters that cause encoding errors in HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend selection
    vector_backend: Literal["pinecone", "qdrant"] = "pinecone"

    # Pinecone settings
    pinecone_api_key: str = ""
    index_name: str = "ycaisus"
    embedding_model: str = "multilingual-e5-large"

    # Qdrant + Gemini settings
    qdrant_url: str = ""
    qdrant_api_key: str = ""
    google_api_key: str = ""
    gemini_embedding_model: str = "gemini-embedding-001"

    @field_validator(
        "pinecone_api_key", "qdrant_api_key", "qdrant_url", "google_api_key", mode="after"
    )
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Search settings
    top_k: int = 10
    request_timeout: float = 30.0
    escape_metadata: bool = True

    # API / frontend
    cors_origins: list[str] = [
        "http://localhost:3000",  # Local dev
        "http://localhost:8501",  # Streamlit
    ]
    search_api_url: str = "http://localhost:8000"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    def missing_credentials(self) -> str | None:
        """Describe the absent credential for the selected backend, if any."""
        if self.vector_backend == "pinecone":
            if not self.pinecone_api_key:
                return "Pinecone API key not configured"
            return None

        if not self.qdrant_url:
            return "Qdrant URL not configured"
        if not self.google_api_key:
            return "Google API key not configured"
        return None


# Global settings instance
settings = Settings()
