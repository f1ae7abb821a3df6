"""FastAPI endpoints for the RAG pipeline.

Endpoints:
    - GET /health: Service health status
    - POST /documents, /documents/pdf: Ingestion
    - POST /retrieve, /retrieve/remote: Context retrieval
    - POST /query: Context-augmented answers
"""

from rag_pipeline.api.app import create_app

__all__ = ["create_app"]
