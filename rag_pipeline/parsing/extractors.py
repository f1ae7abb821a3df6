"""Text extractors turning a PDF source path into plain text.

Two modes:
    - LocalPDFExtractor reads the file and decodes it with pypdf.
    - RemotePDFExtractor delegates to the context backend's /extract-pdf.

Neither writes anything; persisting the result is up to the caller.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from rag_pipeline.clients.base import ContextBackend
from rag_pipeline.errors import (
    ExtractionError,
    ExtractionFailure,
    NetworkError,
    ProtocolError,
)
from rag_pipeline.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, parse_pdf

logger = logging.getLogger(__name__)


class TextExtractor(ABC):
    """Turns a PDF source into raw text."""

    @abstractmethod
    async def extract(self, source: str | Path) -> str:
        """Return the plain text of *source*.

        Raises:
            ExtractionError: If the text cannot be obtained.
        """
        ...


def _report_empty(text: str, source: str | Path) -> str:
    if not text:
        logger.warning(f"Extracted content is empty: {source}")
    else:
        logger.info(f"Extracted {len(text)} characters from {source}")
    return text


class LocalPDFExtractor(TextExtractor):
    """Extract text from a PDF on the local filesystem."""

    def __init__(self, max_size: int = MAX_FILE_SIZE) -> None:
        self._max_size = max_size

    async def extract(self, source: str | Path) -> str:
        operation = f"Failed to extract text from PDF: {source}"
        try:
            with open(source, "rb") as f:
                file_content = f.read()
        except OSError as e:
            raise ExtractionError(operation, ExtractionFailure.IO, str(e)) from e

        try:
            pdf_content = parse_pdf(file_content, max_size=self._max_size)
        except PDFParseError as e:
            raise ExtractionError(operation, ExtractionFailure.PARSE, str(e)) from e

        logger.debug(f"Decoded {pdf_content.pages} pages from {source}")
        return _report_empty(pdf_content.text, source)


class RemotePDFExtractor(TextExtractor):
    """Extract text by sending the PDF path to the context backend."""

    def __init__(self, backend: ContextBackend) -> None:
        self._backend = backend

    async def extract(self, source: str | Path) -> str:
        operation = f"Failed to extract text from PDF: {source}"
        try:
            text = await self._backend.extract_pdf(str(source))
        except NetworkError as e:
            raise ExtractionError(operation, ExtractionFailure.NETWORK, str(e)) from e
        except ProtocolError as e:
            raise ExtractionError(operation, ExtractionFailure.PROTOCOL, str(e)) from e

        return _report_empty(text, source)
