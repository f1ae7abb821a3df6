"""Answer generation through a chat backend.

Responsibilities:
    - Chat backend interface and the Agno/OpenAI implementation
    - Prompt composition from retrieved context and the user query
"""

from rag_pipeline.agent.augmentation import AugmentationOrchestrator, build_prompt
from rag_pipeline.agent.base import ChatBackend
from rag_pipeline.agent.chat_agent import AgnoChatBackend
from rag_pipeline.agent.config import ChatConfig, get_chat_config

__all__ = [
    "AgnoChatBackend",
    "AugmentationOrchestrator",
    "ChatBackend",
    "ChatConfig",
    "build_prompt",
    "get_chat_config",
]
