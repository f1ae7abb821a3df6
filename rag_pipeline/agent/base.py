"""Chat backend interface."""

from abc import ABC, abstractmethod


class ChatBackend(ABC):
    """Answers a single prompt with a chat completion."""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send *prompt* as a single message and return the generated text."""
        ...
