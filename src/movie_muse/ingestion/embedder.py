"""Embedding and vector-store persistence."""

from __future__ import annotations

import hashlib
import logging
from collections import Counter
from typing import TYPE_CHECKING

from langchain_huggingface import HuggingFaceEmbeddings
from langchain_text_splitters import RecursiveCharacterTextSplitter

from movie_muse.config import settings

if TYPE_CHECKING:
    from langchain_core.documents import Document

    from movie_muse.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


def get_embedding_function() -> HuggingFaceEmbeddings:
    """Return the configured sentence-transformer embedding function."""
    return HuggingFaceEmbeddings(model_name=settings.embedding_model)


def chunk_documents(
    documents: list[Document],
    chunk_size: int = 500,
    chunk_overlap: int = 0,
) -> list[Document]:
    """Split *documents* into text segments, each keeping its parent's metadata.

    Splits prefer line boundaries, so a movie record breaks between
    ``column:value`` lines before it breaks inside one.
    """
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        separators=["\n", " ", ""],
    )
    return splitter.split_documents(documents)


def ingest_documents(
    documents: list[Document],
    store: VectorStoreBase,
    *,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
) -> int:
    """Split *documents*, embed the segments and write them to *store*.

    Each segment gets a ``chunk_index`` and an id derived from its
    ``source``, ``row`` and position, so ingesting the same table twice
    overwrites rather than duplicates.

    Returns
    -------
    int
        Number of segments written.
    """
    if not documents:
        logger.info("No documents to ingest")
        return 0

    segments = chunk_documents(
        documents,
        chunk_size=settings.chunk_size if chunk_size is None else chunk_size,
        chunk_overlap=settings.chunk_overlap if chunk_overlap is None else chunk_overlap,
    )

    positions: Counter[tuple[str, str]] = Counter()
    ids: list[str] = []
    for segment in segments:
        parent = (str(segment.metadata.get("source", "")), str(segment.metadata.get("row", "")))
        segment.metadata["chunk_index"] = positions[parent]
        positions[parent] += 1
        ids.append(segment_id(parent[0], parent[1], segment.metadata["chunk_index"]))

    try:
        store.add_documents(segments, ids=ids)
    except Exception:
        logger.exception("Writing %d segment(s) to %r failed", len(segments), store.collection_name)
        raise

    logger.info(
        "Ingested %d document(s) as %d segment(s) into %r",
        len(documents),
        len(segments),
        store.collection_name,
    )
    return len(segments)


def segment_id(source: str, row: str, chunk_index: int) -> str:
    """Stable identifier for one segment of one row."""
    return hashlib.sha1(f"{source}:{row}:{chunk_index}".encode()).hexdigest()
