"""Clients for remote backends."""

from rag_pipeline.clients.base import ContextBackend
from rag_pipeline.clients.remote_service import RemoteServiceClient

__all__ = ["ContextBackend", "RemoteServiceClient"]
