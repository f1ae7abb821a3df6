"""HTTP client for the remote context backend.

Endpoints (all ``POST`` with a JSON body):
    - /extract-pdf: {"pdf_path"} -> {"text"}
    - /generate-embedding: {"content"} -> {"embedding"} (bearer auth)
    - /query: {"query"} -> {"result"} (bearer auth)

No retries and no timeout by default; callers layer those on if needed.
"""

import json
import logging
from typing import Any

import httpx

from rag_pipeline.clients.base import ContextBackend
from rag_pipeline.errors import NetworkError, ProtocolError

logger = logging.getLogger(__name__)


class RemoteServiceClient(ContextBackend):
    """Async client for the extraction/embedding/query backend.

    Each call opens its own ``httpx.AsyncClient`` and closes it before
    returning, on success and on error.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Backend root URL, e.g. ``http://localhost:11434``.
            api_key: Bearer token for authenticated endpoints.
            timeout: Request timeout in seconds, None to wait indefinitely.
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _auth_headers(self) -> dict[str, str]:
        if not self._api_key:
            return {}
        return {"Authorization": f"Bearer {self._api_key}"}

    async def _post(
        self,
        path: str,
        payload: dict[str, Any],
        operation: str,
        authenticated: bool,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        headers = self._auth_headers() if authenticated else {}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise NetworkError(operation, f"request to {url} failed: {e}") from e

        if resp.is_error:
            raise ProtocolError(operation, f"{url} returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ProtocolError(operation, f"response from {url} is not valid JSON") from e

        if not isinstance(data, dict):
            raise ProtocolError(operation, f"response from {url} is not a JSON object")
        return data

    async def extract_pdf(self, pdf_path: str) -> str:
        """Ask the backend to extract text from *pdf_path*.

        Raises:
            NetworkError: On transport failure.
            ProtocolError: If the response lacks a string ``text`` field.
        """
        operation = "Failed to extract PDF text via remote backend"
        data = await self._post(
            "/extract-pdf", {"pdf_path": pdf_path}, operation, authenticated=False
        )
        text = data.get("text")
        if not isinstance(text, str):
            raise ProtocolError(operation, "no 'text' field in backend response")
        return text

    async def generate_embedding(self, content: str) -> list[float]:
        """Generate an embedding for *content*.

        Non-numeric array elements are dropped.

        Raises:
            NetworkError: On transport failure.
            ProtocolError: If the response lacks an ``embedding`` array.
        """
        operation = "Failed to generate embedding via remote backend"
        data = await self._post(
            "/generate-embedding", {"content": content}, operation, authenticated=True
        )
        embedding = data.get("embedding")
        if not isinstance(embedding, list):
            raise ProtocolError(operation, "no 'embedding' field in backend response")

        # bool is an int subclass but not a JSON number
        vector = [
            float(v)
            for v in embedding
            if isinstance(v, (int, float)) and not isinstance(v, bool)
        ]
        if len(vector) != len(embedding):
            logger.debug(f"Dropped {len(embedding) - len(vector)} non-numeric embedding values")
        return vector

    async def query(self, text: str) -> str:
        """Send *text* to the backend's query endpoint.

        Raises:
            NetworkError: On transport failure.
            ProtocolError: If the response lacks a string ``result`` field.
        """
        operation = "Failed to query remote backend"
        data = await self._post("/query", {"query": text}, operation, authenticated=True)
        result = data.get("result")
        if not isinstance(result, str):
            raise ProtocolError(operation, "no 'result' field in backend response")
        return result
