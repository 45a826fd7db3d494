"""Chat state flowing through the LangGraph workflow."""

from __future__ import annotations

from typing import Annotated, TypedDict

from langchain_core.documents import Document
from langchain_core.messages import BaseMessage
from langgraph.graph.message import add_messages


class ChatState(TypedDict):
    """Typed state for one chat turn.

    Attributes
    ----------
    messages:
        Session history managed by LangGraph's ``add_messages`` reducer.
        Persisted across turns by the checkpointer.
    question:
        The user's current question, verbatim.
    documents:
        Segments retrieved for ``question``.
    answer:
        The generated answer for this turn.
    """

    messages: Annotated[list[BaseMessage], add_messages]
    question: str
    documents: list[Document]
    answer: str
