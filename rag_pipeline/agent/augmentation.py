"""Compose retrieved context and the user query into one chat request."""

import logging

from rag_pipeline.agent.base import ChatBackend
from rag_pipeline.errors import ChatServiceError

logger = logging.getLogger(__name__)


def build_prompt(query: str, context: str) -> str:
    """Return the message sent to the chat backend.

    The raw query when there is no context, otherwise the context block
    followed by the question.
    """
    if not context:
        return query
    return f"Context: {context}\n\nQuestion: {query}"


class AugmentationOrchestrator:
    """Send context-augmented queries to a chat backend."""

    def __init__(self, chat_backend: ChatBackend) -> None:
        self._chat_backend = chat_backend

    async def answer(self, query: str, context: str) -> str:
        """Return the chat backend's answer for *query*.

        Args:
            query: The user's question.
            context: Retrieved context window, ``""`` for none.

        Raises:
            ChatServiceError: If the backend call fails. There is no fallback.
        """
        if context:
            logger.info(f"Retrieved relevant context of {len(context)} characters")
        else:
            logger.info("No relevant context; sending query without context")

        prompt = build_prompt(query, context)
        try:
            return await self._chat_backend.complete(prompt)
        except ChatServiceError:
            raise
        except Exception as e:
            raise ChatServiceError("Failed to generate answer", str(e)) from e
