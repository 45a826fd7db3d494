"""Graph nodes — one function per step of a chat turn.

Node contract
-------------
* Accepts the full :class:`ChatState` dict plus its collaborator
  (retriever or chat model), bound by :func:`~movie_muse.chat.graph.build_chat_graph`.
* Returns a *partial* dict with **only the keys that changed**.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.messages import AIMessage, HumanMessage

from movie_muse.chat.prompts import build_chat_prompt
from movie_muse.chat.state import ChatState

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

    from movie_muse.retrieval.retriever import SegmentRetriever

logger = logging.getLogger(__name__)


def retrieve(state: ChatState, retriever: SegmentRetriever) -> dict[str, Any]:
    """Look up the segments relevant to the current question."""
    documents = retriever.relevant_documents(state["question"])
    logger.info("Retrieved %d segment(s) for the question", len(documents))
    return {"documents": documents}


def generate(state: ChatState, llm: BaseChatModel) -> dict[str, Any]:
    """Answer the question from the retrieved segments and session history.

    The verbatim question and the answer are appended to ``messages`` so
    the next turn of the same session sees them; the retrieved context is
    not stored in the history.
    """
    question = state["question"]
    prompt = build_chat_prompt(
        question,
        state.get("documents", []),
        history=list(state.get("messages", [])),
    )
    response = llm.invoke(prompt)
    answer = response.content if isinstance(response.content, str) else str(response.content)

    return {
        "answer": answer,
        "messages": [HumanMessage(content=question), AIMessage(content=answer)],
    }
