"""RAG session: owns the document store and the processed-text handle.

One session is created at application start and passed to every
operation. Ingestion and retrieval run under a single asyncio lock, so a
session can be shared between concurrent requests without interleaving
store mutations.
"""

import asyncio
import logging
from pathlib import Path

from rag_pipeline.clients.base import ContextBackend
from rag_pipeline.errors import (
    BackendNotConfiguredError,
    DocumentIOError,
    MissingContextError,
)
from rag_pipeline.parsing.extractors import LocalPDFExtractor, TextExtractor
from rag_pipeline.parsing.text import normalize_whitespace
from rag_pipeline.retrieval.engine import (
    DEFAULT_WINDOW_RADIUS,
    find_context_window,
    query_keywords,
)
from rag_pipeline.retrieval.store import DocumentStore

logger = logging.getLogger(__name__)


class RAGSession:
    """Ingestion and retrieval over a single in-memory document store.

    Attributes:
        store: Documents added during this session.
        embeddings: Embeddings generated at ingestion, keyed by document id.
            Kept for inspection only; retrieval is purely lexical.
        processed_text_path: Most recently written processed-text file.
    """

    def __init__(
        self,
        extractor: TextExtractor | None = None,
        context_backend: ContextBackend | None = None,
        generate_embeddings: bool = False,
        window_radius: int = DEFAULT_WINDOW_RADIUS,
    ) -> None:
        """Initialize an empty session.

        Args:
            extractor: PDF text extractor. Defaults to local pypdf extraction.
            context_backend: Remote backend for embeddings and remote queries.
            generate_embeddings: Embed every added document via the backend.
            window_radius: Characters of context on each side of a match.

        Raises:
            BackendNotConfiguredError: If embeddings are requested without a
                context backend.
        """
        if generate_embeddings and context_backend is None:
            raise BackendNotConfiguredError(
                "Cannot generate embeddings", "no context backend configured"
            )

        self.store = DocumentStore()
        self.embeddings: dict[str, list[float]] = {}
        self.processed_text_path: Path | None = None
        self._extractor = extractor or LocalPDFExtractor()
        self._context_backend = context_backend
        self._generate_embeddings = generate_embeddings
        self._window_radius = window_radius
        self._lock = asyncio.Lock()

    @property
    def is_populated(self) -> bool:
        """Whether anything has been ingested into this session."""
        return len(self.store) > 0 or self.processed_text_path is not None

    async def add_document(self, doc_id: str, content: str) -> None:
        """Store *content* under *doc_id*, overwriting any previous content.

        When embeddings are enabled the embedding is generated first, so a
        backend failure leaves the store unchanged.

        Raises:
            NetworkError: If embedding generation fails in transport.
            ProtocolError: If the embedding response is malformed.
        """
        async with self._lock:
            await self._add_unlocked(doc_id, content)

    async def _add_unlocked(self, doc_id: str, content: str) -> None:
        embedding = await self._embed(content)
        self._store_unlocked(doc_id, content, embedding)

    async def _embed(self, content: str) -> list[float] | None:
        if self._generate_embeddings and self._context_backend is not None:
            return await self._context_backend.generate_embedding(content)
        return None

    def _store_unlocked(
        self, doc_id: str, content: str, embedding: list[float] | None
    ) -> None:
        if embedding is not None:
            self.embeddings[doc_id] = embedding
        self.store.add(doc_id, content)
        logger.info(f"Document added with ID {doc_id} ({len(content)} characters)")

    async def add_pdf_document(
        self,
        pdf_path: str | Path,
        output_path: str | Path | None = None,
        doc_id: str | None = None,
    ) -> str:
        """Extract, normalize, and store the text of a PDF.

        An empty extraction is not an error: the document is stored with
        empty content. Nothing is written or stored until extraction and
        embedding have both succeeded.

        Args:
            pdf_path: PDF source path.
            output_path: If given, the normalized text is written there
                (UTF-8, overwriting) and becomes the processed-text handle.
            doc_id: Store key. Defaults to the PDF path.

        Returns:
            The normalized text that was stored.

        Raises:
            ExtractionError: If the text cannot be extracted.
            DocumentIOError: If the output file cannot be written.
        """
        async with self._lock:
            raw_text = await self._extractor.extract(pdf_path)
            cleaned = normalize_whitespace(raw_text)
            embedding = await self._embed(cleaned)

            if output_path is not None:
                output = Path(output_path)
                _write_processed_text(output, cleaned)
                logger.info(f"Extracted content saved to {output}")

            self._store_unlocked(doc_id or str(pdf_path), cleaned, embedding)

            if output_path is not None:
                self.processed_text_path = Path(output_path)

            return cleaned

    async def retrieve(self, query: str, doc_id: str | None = None) -> str:
        """Return the context window for *query* from stored documents.

        Without *doc_id*, documents are searched in insertion order and the
        first non-empty window is returned.

        Returns:
            The context window, or ``""`` if no keyword matched.

        Raises:
            MissingContextError: If nothing was ever ingested, or *doc_id* is
                unknown.
        """
        async with self._lock:
            if not self.is_populated:
                raise MissingContextError(
                    "Cannot retrieve context", "no document has been added to this session"
                )

            if doc_id is not None:
                content = self.store.get(doc_id)
                if content is None:
                    raise MissingContextError(
                        "Cannot retrieve context", f"unknown document: {doc_id}"
                    )
                candidates = [(doc_id, content)]
            else:
                candidates = list(self.store.items())

            logger.info(f"Searching for keywords: {query_keywords(query)}")
            for candidate_id, content in candidates:
                window = find_context_window(content, query, self._window_radius)
                if window:
                    logger.debug(f"Matched document {candidate_id}")
                    return window

            logger.info(f'No relevant content found for query: "{query}"')
            return ""

    async def retrieve_from_disk(self, query: str) -> str:
        """Run the window search against the processed-text file.

        Raises:
            MissingContextError: If no processed-text file has been written.
            DocumentIOError: If the file cannot be read.
        """
        async with self._lock:
            text_path = self.processed_text_path
            if text_path is None:
                raise MissingContextError(
                    "Cannot retrieve context", "no processed text file available"
                )

            try:
                content = text_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise DocumentIOError(
                    f"Failed to read processed file: {text_path}", str(e)
                ) from e

        if not content:
            logger.warning(f"Processed file is empty: {text_path}")
            return ""

        window = find_context_window(content, query, self._window_radius)
        if not window:
            logger.info(f'No relevant content found for query: "{query}"')
        return window

    async def retrieve_remote(self, query: str) -> str:
        """Ask the context backend's query endpoint for relevant content.

        Raises:
            BackendNotConfiguredError: If the session has no context backend.
            NetworkError: On transport failure.
            ProtocolError: On a malformed response.
        """
        if self._context_backend is None:
            raise BackendNotConfiguredError(
                "Cannot query remote backend", "no context backend configured"
            )

        result = await self._context_backend.query(query)
        if not result:
            logger.info(f'No relevant content found for query: "{query}"')
        return result


def _write_processed_text(output: Path, text: str) -> None:
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(text.encode("utf-8"))
    except OSError as e:
        raise DocumentIOError(f"Failed to write output file: {output}", str(e)) from e
