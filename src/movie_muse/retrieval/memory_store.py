"""In-process vector store for local runs and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from langchain_core.vectorstores import InMemoryVectorStore as _LCInMemoryVectorStore

from movie_muse.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings


class InMemoryVectorStore(VectorStoreBase):
    """Vector store kept in process memory.

    Backed by LangChain's ``InMemoryVectorStore``; scores are raw cosine
    similarities in ``[-1, 1]``.  Contents are lost when the process exits.
    """

    def __init__(self, embedding: Embeddings, collection_name: str = "movie_muse") -> None:
        super().__init__(collection_name)
        self._store = _LCInMemoryVectorStore(embedding=embedding)

    def add_documents(self, documents: list[Document], *, ids: list[str] | None = None) -> list[str]:
        if not documents:
            return []
        return self._store.add_documents(documents, ids=ids)

    def similarity_search_by_text(self, query: str, *, k: int = 10) -> list[dict[str, Any]]:
        pairs = self._store.similarity_search_with_score(query, k=k)
        return [
            {
                "id": doc.id,
                "content": doc.page_content,
                "score": float(score),
                "metadata": dict(doc.metadata),
            }
            for doc, score in pairs
        ]

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._store.store)
