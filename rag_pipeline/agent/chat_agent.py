"""Agno-backed chat backend.

Wraps an Agno ``Agent`` around an OpenAI-compatible chat model and exposes
a one-shot ``complete(prompt)`` call. The agent has no storage and no
history, so every call is an independent single-message request.
"""

import logging

from agno.agent import Agent
from agno.models.openai import OpenAIChat

from rag_pipeline.agent.base import ChatBackend
from rag_pipeline.agent.config import ChatConfig, get_chat_config
from rag_pipeline.errors import ChatServiceError

logger = logging.getLogger(__name__)


class AgnoChatBackend(ChatBackend):
    """Chat backend built on an Agno agent."""

    def __init__(self, config: ChatConfig | None = None) -> None:
        """Initialize the backend.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_chat_config()
        self._agent = self._create_agent()

    @property
    def model_name(self) -> str:
        return self._config.model_name

    def _create_agent(self) -> Agent:
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        return Agent(
            model=model,
            add_history_to_context=False,
            markdown=False,
        )

    async def complete(self, prompt: str) -> str:
        """Send one message to the model and return its text.

        Raises:
            ChatServiceError: If the model call fails or returns no text.
        """
        operation = f"Chat request to {self._config.model_name} failed"
        try:
            response = await self._agent.arun(prompt)
        except Exception as e:
            logger.error(f"{operation}: {e}")
            raise ChatServiceError(operation, str(e)) from e

        content = getattr(response, "content", None)
        if content is None:
            raise ChatServiceError(operation, "response contained no text")
        return str(content)
