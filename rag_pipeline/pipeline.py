"""Factories wiring configuration into a session and an orchestrator."""

import logging

from rag_pipeline.agent.augmentation import AugmentationOrchestrator
from rag_pipeline.agent.chat_agent import AgnoChatBackend
from rag_pipeline.agent.config import ChatConfig
from rag_pipeline.clients.remote_service import RemoteServiceClient
from rag_pipeline.config import PipelineConfig, get_pipeline_config
from rag_pipeline.parsing.extractors import (
    LocalPDFExtractor,
    RemotePDFExtractor,
    TextExtractor,
)
from rag_pipeline.retrieval.session import RAGSession

logger = logging.getLogger(__name__)


def create_session(config: PipelineConfig | None = None) -> RAGSession:
    """Build a session from pipeline configuration.

    Args:
        config: Pipeline settings. Loads from environment if not provided.

    Returns:
        An empty RAGSession.
    """
    config = config or get_pipeline_config()

    backend: RemoteServiceClient | None = None
    if config.backend_url:
        backend = RemoteServiceClient(
            config.backend_url,
            api_key=config.backend_api_key,
            timeout=config.request_timeout,
        )

    extractor: TextExtractor
    if config.extraction_mode == "remote" and backend is not None:
        extractor = RemotePDFExtractor(backend)
    else:
        extractor = LocalPDFExtractor()

    logger.info(
        f"Creating RAG session (extraction={config.extraction_mode}, "
        f"embeddings={config.generate_embeddings}, backend={config.backend_url})"
    )
    return RAGSession(
        extractor=extractor,
        context_backend=backend,
        generate_embeddings=config.generate_embeddings,
        window_radius=config.window_radius,
    )


def create_orchestrator(config: ChatConfig | None = None) -> AugmentationOrchestrator:
    """Build an orchestrator backed by the Agno chat backend.

    Raises:
        ValueError: If no chat API key is configured.
    """
    return AugmentationOrchestrator(AgnoChatBackend(config))
