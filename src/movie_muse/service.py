"""Composition root — wires loader, ingestion, retrieval and chat.

:func:`bootstrap` performs the whole startup sequence synchronously:

1. load the movies CSV into documents,
2. ingest them into the vector store (exactly once),
3. compile the chat graph around a retriever over that store.

Only then is a :class:`MovieChatService` handed out, so no question can
reach an empty store.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from movie_muse.chat.graph import build_chat_graph, create_turn_input, session_config
from movie_muse.config import settings
from movie_muse.ingestion.embedder import ingest_documents
from movie_muse.ingestion.loader import MalformedRowError, ResourceNotFoundError, load_movie_documents
from movie_muse.retrieval.factory import build_vector_store
from movie_muse.retrieval.retriever import SegmentRetriever

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

    from movie_muse.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


class MovieChatService:
    """Answers movie questions, one conversation per session id."""

    def __init__(self, graph: Any, store: VectorStoreBase | None = None) -> None:
        self._graph = graph
        self._store = store

    def is_ready(self) -> bool:
        """Whether the vector store behind the chat is reachable."""
        return self._store is not None and self._store.health_check()

    def chat(self, session_id: Hashable, question: str) -> str:
        """Return the answer to *question* within session *session_id*.

        The question is forwarded verbatim.
        """
        if not question or not question.strip():
            raise ValueError("question must not be empty")
        result = self._graph.invoke(create_turn_input(question), config=session_config(session_id))
        return result["answer"]


def bootstrap(
    *,
    resource: str | Path | None = None,
    store: VectorStoreBase | None = None,
    llm: BaseChatModel | None = None,
) -> MovieChatService:
    """Load, ingest and return a ready-to-use :class:`MovieChatService`.

    Raises
    ------
    ResourceNotFoundError
        The movies CSV is missing; startup cannot continue.
    MalformedRowError
        The CSV has a row with the wrong number of fields.
    """
    try:
        documents = load_movie_documents(resource)
    except (ResourceNotFoundError, MalformedRowError):
        logger.exception("Cannot load movie data, aborting startup")
        raise

    if store is None:
        store = build_vector_store()
    ingest_documents(documents, store)

    if llm is None:
        from movie_muse.chat.llm import get_llm

        llm = get_llm()

    retriever = SegmentRetriever(store, default_k=settings.retriever_top_k)
    graph = build_chat_graph(retriever, llm)
    logger.info("MovieMuse ready with %d movie(s)", len(documents))
    return MovieChatService(graph, store)
