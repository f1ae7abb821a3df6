"""Unit tests for local and remote PDF text extractors."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from rag_pipeline.errors import (
    ExtractionError,
    ExtractionFailure,
    NetworkError,
    ProtocolError,
)
from rag_pipeline.parsing.extractors import LocalPDFExtractor, RemotePDFExtractor


class TestLocalPDFExtractor:
    async def test_extracts_text_from_file(self, text_pdf_path: Path) -> None:
        text = await LocalPDFExtractor().extract(text_pdf_path)

        assert "Michael Harditya" in text

    async def test_missing_file_is_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            await LocalPDFExtractor().extract(tmp_path / "missing.pdf")

        assert exc_info.value.kind is ExtractionFailure.IO
        assert "missing.pdf" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    async def test_undecodable_file_is_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "fake.pdf"
        path.write_bytes(b"not a pdf at all")

        with pytest.raises(ExtractionError) as exc_info:
            await LocalPDFExtractor().extract(path)

        assert exc_info.value.kind is ExtractionFailure.PARSE

    async def test_empty_extraction_is_reported_not_raised(
        self, blank_pdf_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            text = await LocalPDFExtractor().extract(blank_pdf_path)

        assert text.strip() == ""
        assert "empty" in caplog.text.lower() or "no extractable text" in caplog.text


class TestRemotePDFExtractor:
    @staticmethod
    def _backend(**kwargs: object) -> MagicMock:
        backend = MagicMock()
        backend.extract_pdf = AsyncMock(**kwargs)
        return backend

    async def test_returns_backend_text(self) -> None:
        backend = self._backend(return_value="remote text")

        text = await RemotePDFExtractor(backend).extract(Path("docs/a.pdf"))

        assert text == "remote text"
        backend.extract_pdf.assert_awaited_once_with("docs/a.pdf")

    async def test_network_failure_maps_to_network_kind(self) -> None:
        backend = self._backend(side_effect=NetworkError("send", "connection refused"))

        with pytest.raises(ExtractionError) as exc_info:
            await RemotePDFExtractor(backend).extract("a.pdf")

        assert exc_info.value.kind is ExtractionFailure.NETWORK
        assert isinstance(exc_info.value.__cause__, NetworkError)

    async def test_protocol_failure_maps_to_protocol_kind(self) -> None:
        backend = self._backend(side_effect=ProtocolError("parse", "no 'text' field"))

        with pytest.raises(ExtractionError) as exc_info:
            await RemotePDFExtractor(backend).extract("a.pdf")

        assert exc_info.value.kind is ExtractionFailure.PROTOCOL

    async def test_empty_remote_text_is_returned(self) -> None:
        backend = self._backend(return_value="")

        assert await RemotePDFExtractor(backend).extract("a.pdf") == ""
