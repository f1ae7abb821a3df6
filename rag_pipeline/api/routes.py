"""Document ingestion and query endpoints.

Endpoints:
    - POST /documents: Add a text document
    - POST /documents/pdf: Ingest a PDF from a local path
    - POST /retrieve: Context window for a query
    - POST /retrieve/remote: Query the context backend directly
    - POST /query: Context-augmented answer from the chat backend
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status

from rag_pipeline.agent.augmentation import AugmentationOrchestrator
from rag_pipeline.errors import (
    BackendNotConfiguredError,
    ChatServiceError,
    ExtractionError,
    ExtractionFailure,
    MissingContextError,
    NetworkError,
    ProtocolError,
    RAGError,
)
from rag_pipeline.models.schemas import (
    Document,
    DocumentResponse,
    PDFIngestRequest,
    PDFIngestResponse,
    QueryRequest,
    QueryResponse,
    RetrieveResponse,
)
from rag_pipeline.retrieval.session import RAGSession

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rag"])


def _status_for(error: RAGError) -> int:
    """Map a pipeline error to an HTTP status code."""
    if isinstance(error, MissingContextError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ExtractionError):
        if error.kind in (ExtractionFailure.IO, ExtractionFailure.PARSE):
            return status.HTTP_400_BAD_REQUEST
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(error, (NetworkError, ProtocolError, ChatServiceError)):
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(error, BackendNotConfiguredError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    # DocumentIOError and anything unexpected
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _to_http(error: RAGError) -> HTTPException:
    code = _status_for(error)
    if code >= 500:
        logger.error(f"{type(error).__name__}: {error}")
    else:
        logger.warning(f"{type(error).__name__}: {error}")
    return HTTPException(status_code=code, detail=str(error))


def _session(request: Request) -> RAGSession:
    return request.app.state.session


def _orchestrator(request: Request) -> AugmentationOrchestrator:
    orchestrator = request.app.state.orchestrator
    if orchestrator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Chat backend is not configured",
        )
    return orchestrator


@router.post("/documents", response_model=DocumentResponse)
async def add_document(document: Document, request: Request) -> DocumentResponse:
    """Add or overwrite a text document."""
    session = _session(request)
    try:
        await session.add_document(document.doc_id, document.content)
    except RAGError as e:
        raise _to_http(e) from e

    return DocumentResponse(
        doc_id=document.doc_id,
        characters=len(document.content),
        embedded=document.doc_id in session.embeddings,
    )


@router.post("/documents/pdf", response_model=PDFIngestResponse)
async def ingest_pdf(payload: PDFIngestRequest, request: Request) -> PDFIngestResponse:
    """Extract, normalize and store the text of a PDF.

    Raises:
        400: PDF unreadable or undecodable.
        502: Remote extraction failed.
        500: Output file could not be written.
    """
    session = _session(request)
    doc_id = payload.doc_id or payload.pdf_path
    try:
        text = await session.add_pdf_document(
            payload.pdf_path,
            output_path=payload.output_path,
            doc_id=doc_id,
        )
    except RAGError as e:
        raise _to_http(e) from e

    logger.info(f"Successfully ingested PDF: {payload.pdf_path} ({len(text)} characters)")
    return PDFIngestResponse(
        doc_id=doc_id,
        characters=len(text),
        output_path=payload.output_path,
        empty=not text,
    )


@router.post("/retrieve", response_model=RetrieveResponse)
async def retrieve(payload: QueryRequest, request: Request) -> RetrieveResponse:
    """Return the context window for a query."""
    try:
        context = await _session(request).retrieve(payload.query, doc_id=payload.doc_id)
    except RAGError as e:
        raise _to_http(e) from e
    return RetrieveResponse(context=context, context_found=bool(context))


@router.post("/retrieve/remote", response_model=RetrieveResponse)
async def retrieve_remote(payload: QueryRequest, request: Request) -> RetrieveResponse:
    """Return the context backend's answer for a query."""
    try:
        context = await _session(request).retrieve_remote(payload.query)
    except RAGError as e:
        raise _to_http(e) from e
    return RetrieveResponse(context=context, context_found=bool(context))


@router.post("/query", response_model=QueryResponse)
async def query(payload: QueryRequest, request: Request) -> QueryResponse:
    """Retrieve context for the query and ask the chat backend.

    An empty context is not an error: the query is sent on its own.

    Raises:
        404: Nothing ingested yet, or unknown doc_id.
        502: Chat backend failure.
        503: Chat backend not configured.
    """
    orchestrator = _orchestrator(request)
    try:
        context = await _session(request).retrieve(payload.query, doc_id=payload.doc_id)
        answer = await orchestrator.answer(payload.query, context)
    except RAGError as e:
        raise _to_http(e) from e

    return QueryResponse(answer=answer, context=context, context_found=bool(context))
