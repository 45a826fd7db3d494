"""Segment retriever — top-K lookup with citation tracking.

Usage::

    from movie_muse.retrieval import SegmentRetriever, build_vector_store

    retriever = SegmentRetriever(build_vector_store())
    for r in retriever.search("Which Nolan films are in the list?"):
        print(r.citation.row, r.content[:80])
"""

from __future__ import annotations

import logging
from typing import Any

from langchain_core.documents import Document

from movie_muse.retrieval.base import VectorStoreBase
from movie_muse.retrieval.models import Citation, RetrievalResult

logger = logging.getLogger(__name__)


class SegmentRetriever:
    """High-level retriever that wraps any :class:`VectorStoreBase`.

    Parameters
    ----------
    store:
        A concrete vector-store backend.
    default_k:
        Default number of segments returned by :meth:`search`.
    score_threshold:
        Minimum similarity score; results below it are discarded.  Score
        scales differ per backend, so ``None`` (the default) keeps every hit.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        *,
        default_k: int = 10,
        score_threshold: float | None = None,
    ) -> None:
        self.store = store
        self.default_k = default_k
        self.score_threshold = score_threshold

    def search(self, query: str, *, k: int | None = None) -> list[RetrievalResult]:
        """Run a similarity search and return results with citations."""
        k = k or self.default_k
        raw_hits = self.store.similarity_search_by_text(query, k=k)
        results = self._to_results(raw_hits)
        logger.debug("Retrieved %d segment(s) for %r", len(results), query)
        return results

    def relevant_documents(self, query: str, *, k: int | None = None) -> list[Document]:
        """Same as :meth:`search`, converted to LangChain documents for prompting."""
        return [
            Document(
                page_content=r.content,
                metadata={**r.citation.metadata, "score": r.citation.score},
            )
            for r in self.search(query, k=k)
        ]

    # -- internals ------------------------------------------------------------

    def _to_results(self, raw_hits: list[dict[str, Any]]) -> list[RetrievalResult]:
        results: list[RetrievalResult] = []
        for hit in raw_hits:
            score = hit.get("score")
            if self.score_threshold is not None and score is not None and score < self.score_threshold:
                continue

            meta = hit.get("metadata") or {}
            row = meta.get("row")
            citation = Citation(
                document_id=hit.get("id"),
                source=meta.get("source", "unknown"),
                row=str(row) if row is not None else None,
                score=score,
                metadata=meta,
            )
            results.append(RetrievalResult(content=hit.get("content", ""), citation=citation))
        return results
