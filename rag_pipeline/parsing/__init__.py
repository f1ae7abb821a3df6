"""Document parsing for the ingestion pipeline.

Responsibilities:
    - PDF text extraction with pypdf, locally or through the context backend
    - Whitespace normalization of extracted text
"""

from rag_pipeline.parsing.extractors import (
    LocalPDFExtractor,
    RemotePDFExtractor,
    TextExtractor,
)
from rag_pipeline.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf
from rag_pipeline.parsing.text import normalize_whitespace

__all__ = [
    "LocalPDFExtractor",
    "PDFContent",
    "PDFParseError",
    "RemotePDFExtractor",
    "TextExtractor",
    "normalize_whitespace",
    "parse_pdf",
]
