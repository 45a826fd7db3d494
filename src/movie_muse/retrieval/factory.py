"""Backend selection for the vector store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from movie_muse.config import settings
from movie_muse.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings


def build_vector_store(
    backend: str | None = None,
    *,
    embedding: Embeddings | None = None,
) -> VectorStoreBase:
    """Return the vector store named by *backend* (default: settings).

    ``"chroma"`` connects to the configured Chroma server; ``"memory"``
    keeps everything in process.
    """
    backend = (backend or settings.vector_store_backend).lower()

    if backend == "chroma":
        from movie_muse.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore(embedding=embedding)

    if backend == "memory":
        from movie_muse.retrieval.memory_store import InMemoryVectorStore

        if embedding is None:
            from movie_muse.ingestion.embedder import get_embedding_function

            embedding = get_embedding_function()
        return InMemoryVectorStore(embedding, collection_name=settings.chroma_collection)

    raise ValueError(f"Unknown vector store backend: {backend!r}")
