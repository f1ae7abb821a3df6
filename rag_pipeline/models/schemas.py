"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field, field_validator


class Document(BaseModel):
    """A stored document.

    Attributes:
        doc_id: Caller-supplied identifier.
        content: Document text.
    """

    doc_id: str = Field(..., min_length=1)
    content: str


class DocumentResponse(BaseModel):
    """Response after adding a document."""

    doc_id: str
    characters: int = Field(ge=0)
    embedded: bool = False


class PDFIngestRequest(BaseModel):
    """Request to ingest a PDF from a local path.

    Attributes:
        pdf_path: Path of the PDF to ingest.
        output_path: Where to write the normalized text, if anywhere.
        doc_id: Store key; defaults to the PDF path.
    """

    pdf_path: str = Field(..., min_length=1)
    output_path: str | None = None
    doc_id: str | None = None


class PDFIngestResponse(BaseModel):
    """Response after PDF ingestion.

    Attributes:
        doc_id: Key the text was stored under.
        characters: Length of the normalized text.
        output_path: Processed-text file written, if any.
        empty: True when nothing could be extracted.
    """

    doc_id: str
    characters: int = Field(ge=0)
    output_path: str | None = None
    empty: bool


class QueryRequest(BaseModel):
    """Query payload for retrieval and answering.

    Attributes:
        query: Free-text query.
        doc_id: Restrict retrieval to this document.
    """

    query: str = Field(..., min_length=1)
    doc_id: str | None = None

    @field_validator("query", mode="before")
    @classmethod
    def strip_query(cls, v: str) -> str:
        """Strip whitespace from query before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class RetrieveResponse(BaseModel):
    """Context window found for a query ("" when nothing matched)."""

    context: str
    context_found: bool


class QueryResponse(BaseModel):
    """Answer from the chat backend with the context it was given.

    Attributes:
        answer: Generated answer text.
        context: Context window sent along with the query.
        context_found: Whether any context was retrieved.
    """

    answer: str
    context: str
    context_found: bool
