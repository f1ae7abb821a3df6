"""Exception hierarchy for the RAG pipeline.

Every error carries a short description of the operation that was being
attempted. The underlying cause is chained with ``raise ... from``.
"""

from enum import Enum


class RAGError(Exception):
    """Base class for all pipeline errors.

    Attributes:
        operation: Human-readable description of the failed operation.
    """

    def __init__(self, operation: str, detail: str | None = None) -> None:
        self.operation = operation
        self.detail = detail
        message = f"{operation}: {detail}" if detail else operation
        super().__init__(message)


class DocumentIOError(RAGError):
    """Raised when a local file cannot be opened, read, or written."""

    pass


class ExtractionFailure(str, Enum):
    """Cause of a text extraction failure."""

    IO = "io"
    PARSE = "parse"
    NETWORK = "network"
    PROTOCOL = "protocol"


class ExtractionError(RAGError):
    """Raised when text cannot be extracted from a PDF source."""

    def __init__(
        self,
        operation: str,
        kind: ExtractionFailure,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        super().__init__(operation, detail)


class NetworkError(RAGError):
    """Raised on HTTP transport failure against a remote backend."""

    pass


class ProtocolError(RAGError):
    """Raised when a remote backend returns a malformed or incomplete response."""

    pass


class MissingContextError(RAGError):
    """Raised when retrieval runs before anything was ingested."""

    pass


class ChatServiceError(RAGError):
    """Raised when the chat backend call fails."""

    pass


class BackendNotConfiguredError(RAGError):
    """Raised when an operation needs a context backend that was not set up."""

    pass
