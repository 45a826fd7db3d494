"""
Chat — the MovieMuse conversational interface.

A two-node LangGraph workflow (retrieve, generate) whose checkpointer
keeps per-session memory.

Public API
----------
- :func:`build_chat_graph` — compile the workflow.
- :func:`session_config` — runnable config for one session.
- :func:`get_llm` — configured chat model.
"""

from movie_muse.chat.graph import build_chat_graph, create_turn_input, session_config
from movie_muse.chat.llm import get_llm
from movie_muse.chat.prompts import MOVIE_MUSE_SYSTEM
from movie_muse.chat.state import ChatState

__all__ = [
    "MOVIE_MUSE_SYSTEM",
    "ChatState",
    "build_chat_graph",
    "create_turn_input",
    "get_llm",
    "session_config",
]
