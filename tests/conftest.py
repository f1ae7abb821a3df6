"""Pytest fixtures and shared test configuration.

Fixtures:
    - text_pdf_bytes / text_pdf_path: Single-page PDF with known text
    - blank_pdf_path: PDF whose only page has no text
    - chat_backend: Recording chat backend double
    - session: Empty RAGSession with local extraction
    - async_client: HTTPX client bound to an app serving that session
"""

import io
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from rag_pipeline.agent.augmentation import AugmentationOrchestrator
from rag_pipeline.agent.base import ChatBackend
from rag_pipeline.api.app import create_app
from rag_pipeline.retrieval.session import RAGSession

SAMPLE_TEXT = "Michael Harditya is a student."


def build_text_pdf(text: str) -> bytes:
    """Build a minimal one-page PDF showing *text* in Helvetica."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>"
        ),
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def build_blank_pdf() -> bytes:
    """Build a one-page PDF with no text."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class RecordingChatBackend(ChatBackend):
    """Chat backend double that records prompts and returns a fixed reply."""

    def __init__(self, reply: str = "generated answer") -> None:
        self.reply = reply
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture
def text_pdf_bytes() -> bytes:
    return build_text_pdf(SAMPLE_TEXT)


@pytest.fixture
def text_pdf_path(tmp_path: Path, text_pdf_bytes: bytes) -> Path:
    """Write the sample text PDF to a temporary file."""
    path = tmp_path / "sample.pdf"
    path.write_bytes(text_pdf_bytes)
    return path


@pytest.fixture
def blank_pdf_path(tmp_path: Path) -> Path:
    """Write a text-less PDF to a temporary file."""
    path = tmp_path / "blank.pdf"
    path.write_bytes(build_blank_pdf())
    return path


@pytest.fixture
def chat_backend() -> RecordingChatBackend:
    return RecordingChatBackend()


@pytest.fixture
def session() -> RAGSession:
    return RAGSession()


@pytest.fixture
async def async_client(
    session: RAGSession, chat_backend: RecordingChatBackend
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        AsyncClient bound to an app serving the ``session`` fixture.
    """
    app = create_app(session=session, orchestrator=AugmentationOrchestrator(chat_backend))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
