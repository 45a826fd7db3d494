"""Domain models for retrieval results and citation tracking."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """Provenance record linking a retrieved segment back to its CSV row.

    Attributes
    ----------
    citation_id:
        Unique identifier for this citation instance.
    document_id:
        The vector-store ID of the segment (``None`` when unknown).
    source:
        Name of the resource the row came from.
    row:
        1-based row number within the source, as stored in metadata.
    score:
        Similarity score returned by the vector store.
    metadata:
        The full metadata of the segment.
    retrieved_at:
        UTC timestamp of when the retrieval happened.
    """

    citation_id: str = Field(default_factory=lambda: uuid4().hex[:12])
    document_id: str | None = None
    source: str = "unknown"
    row: str | None = None
    score: float | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    retrieved_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RetrievalResult(BaseModel):
    """A single retrieved segment together with its citation."""

    content: str
    citation: Citation
