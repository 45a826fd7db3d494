"""
Retrieval — vector search and citation tracking.

This module wraps the vector store behind a small interface so that
the chat layer never needs to know which DB is backing retrieval.

Public surface
--------------
- :class:`SegmentRetriever` — top-K segment lookup with citations.
- :class:`VectorStoreBase` — abstract backend.
- :class:`ChromaVectorStore` — default Chroma backend.
- :class:`InMemoryVectorStore` — in-process backend.
- :class:`Citation`, :class:`RetrievalResult` — data models.
- :func:`build_vector_store` — backend factory driven by settings.
"""

from movie_muse.retrieval.base import VectorStoreBase
from movie_muse.retrieval.factory import build_vector_store
from movie_muse.retrieval.memory_store import InMemoryVectorStore
from movie_muse.retrieval.models import Citation, RetrievalResult
from movie_muse.retrieval.retriever import SegmentRetriever

__all__ = [
    "Citation",
    "ChromaVectorStore",
    "InMemoryVectorStore",
    "RetrievalResult",
    "SegmentRetriever",
    "VectorStoreBase",
    "build_vector_store",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import ChromaVectorStore to avoid pulling in chromadb at import time."""
    if name == "ChromaVectorStore":
        from movie_muse.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
