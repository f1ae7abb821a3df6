"""Context backend interface: extraction, embeddings, keyword query."""

from abc import ABC, abstractmethod


class ContextBackend(ABC):
    """Remote service for PDF extraction, embeddings and context queries."""

    @abstractmethod
    async def extract_pdf(self, pdf_path: str) -> str:
        """Return the plain text of the PDF at *pdf_path*."""
        ...

    @abstractmethod
    async def generate_embedding(self, content: str) -> list[float]:
        """Return an embedding vector for *content*."""
        ...

    @abstractmethod
    async def query(self, text: str) -> str:
        """Return the backend's answer for *text*."""
        ...
