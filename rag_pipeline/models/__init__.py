"""Pydantic models for API requests and responses.

Models:
    - Document: Stored document (id and content)
    - DocumentResponse: Result of adding a document
    - PDFIngestRequest / PDFIngestResponse: PDF ingestion
    - QueryRequest: Retrieval and answer requests
    - RetrieveResponse: Context window for a query
    - QueryResponse: Generated answer with its context
"""

from rag_pipeline.models.schemas import (
    Document,
    DocumentResponse,
    PDFIngestRequest,
    PDFIngestResponse,
    QueryRequest,
    QueryResponse,
    RetrieveResponse,
)

__all__ = [
    "Document",
    "DocumentResponse",
    "PDFIngestRequest",
    "PDFIngestResponse",
    "QueryRequest",
    "QueryResponse",
    "RetrieveResponse",
]
