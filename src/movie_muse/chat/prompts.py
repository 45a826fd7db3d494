"""Prompt templates for the MovieMuse chat."""

from __future__ import annotations

from typing import TYPE_CHECKING

from langchain_core.messages import HumanMessage, SystemMessage

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.messages import BaseMessage

MOVIE_MUSE_SYSTEM = """\
You are MovieMuse, an AI answering questions about the top 100 movies from IMDB.
Your response must be polite, use the same language as the question, and be relevant to the question.

Introduce yourself with: "Hello, I'm MovieMuse, how can I help you?"
"""


def build_chat_prompt(
    question: str,
    documents: list[Document],
    history: list[BaseMessage] | None = None,
) -> list[BaseMessage]:
    """Assemble the messages for one chat turn.

    Parameters
    ----------
    question:
        The user's question, verbatim.
    documents:
        Retrieved movie segments.
    history:
        Earlier messages of the same session, oldest first.

    Returns
    -------
    list[BaseMessage]
        System prompt, session history, then the context-bearing question.
    """
    context = _format_documents_numbered(documents) or "(no matching movies found)"
    user_msg = (
        f"Context:\n{context}\n\n"
        f"Question: {question}"
    )
    return [
        SystemMessage(content=MOVIE_MUSE_SYSTEM),
        *(history or []),
        HumanMessage(content=user_msg),
    ]


def _format_documents_numbered(documents: list[Document]) -> str:
    """Numbered listing of segments with their row reference."""
    parts: list[str] = []
    for i, doc in enumerate(documents, 1):
        source = doc.metadata.get("source", "unknown")
        row = doc.metadata.get("row", "?")
        parts.append(f"[{i}] {source}#{row}\n{doc.page_content}")
    return "\n\n".join(parts)
