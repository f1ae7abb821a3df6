"""In-memory document store."""

from collections.abc import Iterator


class DocumentStore:
    """Mapping from document id to stored text content.

    Re-adding an id overwrites its content. Not synchronized: the owning
    RAGSession guards access.
    """

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def add(self, doc_id: str, content: str) -> None:
        self._documents[doc_id] = content

    def get(self, doc_id: str) -> str | None:
        return self._documents.get(doc_id)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._documents.items())

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
