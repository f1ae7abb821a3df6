"""Settings for the chat-completion backend that answers augmented prompts.

``LLM_*`` variables take precedence over ``OPENAI_API_KEY``. Any
OpenAI-compatible endpoint can be used through ``LLM_BASE_URL``.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()


def _env_api_key() -> str:
    return os.getenv("LLM_API_KEY") or os.getenv("OPENAI_API_KEY") or ""


class ChatConfig(BaseModel):
    """Chat backend settings.

    Every prompt is sent as one stateless message, so there are no
    history or session settings here.

    Attributes:
        api_key: Credential for the chat-completion provider.
        base_url: Alternative OpenAI-compatible endpoint, or None.
        model_name: Chat model identifier.
        temperature: Sampling temperature in [0, 2].
        max_tokens: Upper bound on answer length.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=_env_api_key,
        description="Chat provider API key",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="OpenAI-compatible endpoint override",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o-mini"),
        description="Chat model identifier",
    )
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, ge=1, le=128000)

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        """Reject a blank key, including one picked up from the environment."""
        v = v.strip()
        if not v:
            raise ValueError("No chat API key: set LLM_API_KEY or OPENAI_API_KEY")
        return v


def get_chat_config() -> ChatConfig:
    """Load chat settings from the environment.

    Raises:
        ValueError: If no API key is set.
    """
    return ChatConfig()
