"""FastAPI application factory and configuration.

The RAG session is created once per application and kept on ``app.state``
for every request; it is never rebuilt per call.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rag_pipeline.agent.augmentation import AugmentationOrchestrator
from rag_pipeline.api.routes import router
from rag_pipeline.pipeline import create_orchestrator, create_session
from rag_pipeline.retrieval.session import RAGSession

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Create the session and chat orchestrator unless they were injected.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting RAG pipeline API...")
    if app.state.session is None:
        app.state.session = create_session()
    if app.state.orchestrator is None:
        try:
            app.state.orchestrator = create_orchestrator()
        except ValueError as e:
            logger.warning(f"Chat backend disabled: {e}")
    yield
    logger.info("Shutting down RAG pipeline API...")
    app.state.session = None


def create_app(
    session: RAGSession | None = None,
    orchestrator: AugmentationOrchestrator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        session: Session to serve. Created from environment on startup if omitted.
        orchestrator: Chat orchestrator. Created from environment on startup if omitted.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="RAG Pipeline API",
        description=(
            "Keyword-window retrieval-augmented generation. Ingests text and PDF "
            "documents, retrieves the context around matching query keywords, and "
            "answers through a chat-completion backend."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.session = session
    application.state.orchestrator = orchestrator

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "rag-pipeline"}

    return application
