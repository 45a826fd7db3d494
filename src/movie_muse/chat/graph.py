"""LangGraph graph definition — the MovieMuse chat workflow.

Each invocation is one chat turn::

      START ─▶ retrieve ─▶ generate ─▶ END

Conversation memory is kept by the checkpointer: the session id is used
as the LangGraph ``thread_id``, so every turn of a session sees the
``messages`` written by the previous ones.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from langgraph.checkpoint.memory import MemorySaver
from langgraph.graph import END, StateGraph

from movie_muse.chat.nodes import generate, retrieve
from movie_muse.chat.state import ChatState

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langgraph.checkpoint.base import BaseCheckpointSaver

    from movie_muse.retrieval.retriever import SegmentRetriever


def build_chat_graph(
    retriever: SegmentRetriever,
    llm: BaseChatModel,
    *,
    checkpointer: BaseCheckpointSaver | None = None,
) -> Any:
    """Construct and compile the chat workflow.

    Parameters
    ----------
    retriever:
        Relevant-segment lookup used by the ``retrieve`` node.
    llm:
        Chat model used by the ``generate`` node.
    checkpointer:
        Where session history is kept; an in-memory ``MemorySaver`` when
        omitted.
    """

    def _retrieve(state: ChatState) -> dict[str, Any]:
        return retrieve(state, retriever)

    def _generate(state: ChatState) -> dict[str, Any]:
        return generate(state, llm)

    workflow = StateGraph(ChatState)

    workflow.add_node("retrieve", _retrieve)
    workflow.add_node("generate", _generate)

    workflow.set_entry_point("retrieve")
    workflow.add_edge("retrieve", "generate")
    workflow.add_edge("generate", END)

    return workflow.compile(checkpointer=checkpointer or MemorySaver())


def session_config(session_id: Hashable) -> dict[str, Any]:
    """Runnable config that scopes a graph call to *session_id*.

    The thread key includes the id's type so that e.g. ``1`` and ``"1"``
    stay separate conversations.
    """
    return {"configurable": {"thread_id": f"{type(session_id).__qualname__}:{session_id!r}"}}


def create_turn_input(question: str) -> dict[str, Any]:
    """Initial state for one turn; ``messages`` is restored by the checkpointer."""
    return {"question": question, "documents": [], "answer": ""}
