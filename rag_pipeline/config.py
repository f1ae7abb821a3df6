"""Pipeline configuration: context backend and ingestion settings."""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rag_pipeline.retrieval.engine import DEFAULT_WINDOW_RADIUS

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_timeout() -> str | None:
    # parsed and range-checked by the field validator
    return os.getenv("RAG_REQUEST_TIMEOUT", "").strip() or None


class PipelineConfig(BaseModel):
    """Configuration for ingestion and the context backend.

    Attributes:
        backend_url: Base URL of the extraction/embedding/query backend.
        backend_api_key: Bearer token for authenticated backend endpoints.
        extraction_mode: ``local`` (pypdf) or ``remote`` (backend /extract-pdf).
        generate_embeddings: Embed each ingested document via the backend.
        window_radius: Context characters on each side of a keyword match.
        request_timeout: Backend request timeout in seconds (None = no timeout).
    """

    model_config = ConfigDict(validate_default=True)

    backend_url: str | None = Field(
        default_factory=lambda: os.getenv("RAG_BACKEND_URL") or None,
        description="Context backend base URL",
    )
    backend_api_key: str | None = Field(
        default_factory=lambda: os.getenv("RAG_BACKEND_API_KEY") or None,
        description="Bearer token for the context backend",
    )
    extraction_mode: Literal["local", "remote"] = Field(
        default_factory=lambda: os.getenv("RAG_EXTRACTION_MODE", "local"),
        description="Where PDF text extraction runs",
    )
    generate_embeddings: bool = Field(
        default_factory=lambda: _env_bool("RAG_GENERATE_EMBEDDINGS"),
        description="Generate an embedding for every ingested document",
    )
    window_radius: int = Field(
        default=DEFAULT_WINDOW_RADIUS,
        ge=0,
        description="Characters of context around a keyword match",
    )
    request_timeout: float | None = Field(
        default_factory=_env_timeout,
        gt=0,
        description="Backend request timeout in seconds",
    )

    @field_validator("extraction_mode", mode="before")
    @classmethod
    def normalize_extraction_mode(cls, v: object) -> object:
        """Accept the mode case-insensitively, e.g. ``Remote``."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("backend_url")
    @classmethod
    def strip_backend_url(cls, v: str | None) -> str | None:
        """Drop trailing slashes so endpoint paths join cleanly."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @model_validator(mode="after")
    def require_backend_when_used(self) -> "PipelineConfig":
        """Remote extraction and embeddings both need a backend URL."""
        if self.backend_url is None:
            if self.extraction_mode == "remote":
                raise ValueError("RAG_BACKEND_URL is required for remote extraction")
            if self.generate_embeddings:
                raise ValueError("RAG_BACKEND_URL is required to generate embeddings")
        return self


def get_pipeline_config() -> PipelineConfig:
    """Create pipeline configuration from environment.

    Raises:
        ValueError: If the settings are inconsistent.
    """
    return PipelineConfig()
