"""PDF text extraction using pypdf.

Decodes raw PDF bytes into plain text. Pages without extractable text are
skipped; a document with no text at all is not an error.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB
PDF_MAGIC_BYTES = b"%PDF"


class PDFContent(BaseModel):
    """Text decoded from a PDF file.

    Attributes:
        text: Combined text content from all pages.
        pages: Total number of pages in the document.
    """

    text: str
    pages: int = Field(ge=0)


class PDFParseError(Exception):
    """Raised when PDF bytes cannot be decoded."""

    pass


def _validate_pdf_bytes(file_content: bytes, max_size: int) -> None:
    """Reject content that cannot be a PDF before handing it to pypdf.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > max_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise PDFParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def parse_pdf(file_content: bytes, max_size: int = MAX_FILE_SIZE) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Largest accepted input in bytes.

    Returns:
        PDFContent with extracted text and page count.

    Raises:
        PDFParseError: If the bytes are not a decodable PDF.
    """
    _validate_pdf_bytes(file_content, max_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text()
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            continue
        if page_text:
            text_parts.append(page_text)

    text = "\n\n".join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=pages)
