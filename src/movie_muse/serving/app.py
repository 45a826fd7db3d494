"""FastAPI application exposing the MovieMuse chat as a REST API.

Run with ``uvicorn movie_muse.serving.app:app``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field, field_validator

from movie_muse.config import settings
from movie_muse.service import MovieChatService, bootstrap

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load and ingest the movie data before the first request."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    app.state.service = bootstrap()
    yield


app = FastAPI(
    title="MovieMuse API",
    version="0.1.0",
    description="Chat about the IMDB top 100 movies.",
    lifespan=lifespan,
)


# ── Request / Response schemas ────────────────────────────────────────
class ChatRequest(BaseModel):
    """A question asked within a session."""

    session_id: str = Field(default="default", min_length=1)
    question: str

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be blank")
        return value


class ChatResponse(BaseModel):
    """MovieMuse's answer."""

    session_id: str
    answer: str


def get_service(request: Request) -> MovieChatService:
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="MovieMuse is not ready")
    return service


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}


@app.get("/ready")
def ready(service: MovieChatService = Depends(get_service)) -> dict[str, str]:
    """Readiness check: data ingested and the vector store reachable."""
    if not service.is_ready():
        raise HTTPException(status_code=503, detail="Vector store unavailable")
    return {"status": "ready"}


@app.post("/chat", response_model=ChatResponse)
def chat(request: ChatRequest, service: MovieChatService = Depends(get_service)) -> ChatResponse:
    """Answer a question, remembering earlier turns of the same session."""
    answer = service.chat(request.session_id, request.question)
    return ChatResponse(session_id=request.session_id, answer=answer)
