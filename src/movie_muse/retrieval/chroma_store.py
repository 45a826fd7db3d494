"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import chromadb
from langchain_huggingface import HuggingFaceEmbeddings

from movie_muse.config import settings
from movie_muse.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Parameters
    ----------
    collection_name:
        Name of the Chroma collection.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    embedding:
        Embedding function; defaults to the configured HuggingFace model.
    client:
        Pre-built chromadb client, mainly for tests.
    """

    def __init__(
        self,
        collection_name: str = settings.chroma_collection,
        *,
        host: str = settings.chroma_host,
        port: int = settings.chroma_port,
        embedding: Embeddings | None = None,
        client: Any = None,
    ) -> None:
        super().__init__(collection_name)
        self._client = client if client is not None else chromadb.HttpClient(host=host, port=port)
        self._collection = self._client.get_or_create_collection(collection_name)
        self._embedder = embedding or HuggingFaceEmbeddings(model_name=settings.embedding_model)

    def add_documents(self, documents: list[Document], *, ids: list[str] | None = None) -> list[str]:
        if not documents:
            return []
        if ids is None:
            ids = [uuid4().hex for _ in documents]
        texts = [doc.page_content for doc in documents]
        self._collection.upsert(
            ids=ids,
            documents=texts,
            metadatas=[dict(doc.metadata) for doc in documents],
            embeddings=self._embedder.embed_documents(texts),
        )
        return ids

    def similarity_search_by_text(self, query: str, *, k: int = 10) -> list[dict[str, Any]]:
        results = self._collection.query(
            query_embeddings=[self._embedder.embed_query(query)],
            n_results=k,
            include=["documents", "metadatas", "distances"],
        )

        ids = results.get("ids", [[]])[0]
        docs = results.get("documents", [[]])[0]
        metas = results.get("metadatas", [[]])[0]
        distances = results.get("distances", [[]])[0]

        # L2 distance mapped onto (0, 1], higher is closer.
        return [
            {"id": doc_id, "content": content or "", "score": 1.0 / (1.0 + dist), "metadata": meta or {}}
            for doc_id, content, meta, dist in zip(ids, docs, metas, distances)
        ]

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False
