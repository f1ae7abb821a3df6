"""Document storage and keyword context-window retrieval."""

from rag_pipeline.retrieval.engine import DEFAULT_WINDOW_RADIUS, find_context_window
from rag_pipeline.retrieval.session import RAGSession
from rag_pipeline.retrieval.store import DocumentStore

__all__ = ["DEFAULT_WINDOW_RADIUS", "DocumentStore", "RAGSession", "find_context_window"]
