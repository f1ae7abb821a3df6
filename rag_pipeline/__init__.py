"""RAG Pipeline - keyword-window retrieval-augmented generation.

Ingests text and PDF documents into an in-memory session, finds the context
around matching query keywords, and answers through a chat-completion backend.

Components:
    - parsing: PDF text extraction and whitespace normalization
    - retrieval: Document store, context-window search, session lifecycle
    - clients: HTTP client for the extraction/embedding/query backend
    - agent: Chat backend and prompt augmentation
    - api: HTTP endpoints
    - models: Request/response schemas
"""

__version__ = "0.1.0"
