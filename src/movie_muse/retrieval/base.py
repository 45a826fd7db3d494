"""Abstract base class for vector-store backends.

The chat layer only ever needs "give me the segments relevant to this
question".  Any store that can take embedded segments in and answer a
text query is a valid backend: subclass :class:`VectorStoreBase` and
implement the three abstract methods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from langchain_core.documents import Document


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    collection_name:
        Logical name of the collection / index / namespace.
    """

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    @abstractmethod
    def add_documents(self, documents: list[Document], *, ids: list[str] | None = None) -> list[str]:
        """Embed and persist *documents*, returning their store ids.

        Passing an id that already exists replaces the stored segment.
        """
        ...

    @abstractmethod
    def similarity_search_by_text(self, query: str, *, k: int = 10) -> list[dict[str, Any]]:
        """Return the top-*k* segments for *query*.

        Each result dict **must** contain at least:

        * ``"id"`` – segment identifier
        * ``"content"`` – the textual content
        * ``"score"`` – similarity score (higher = more similar)
        * ``"metadata"`` – associated metadata dict
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...
