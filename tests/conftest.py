"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from movie_muse.retrieval.memory_store import InMemoryVectorStore

HEADER = "index,movie_name,year_of_release,category,run_time,genre,imdb_rating,votes,gross_total"

SAMPLE_ROWS = [
    '1,The Godfather,1972,Movies,175,Crime,9.2,1900000,134966411',
    '2,The Dark Knight,2008,Movies,152,"Action, Crime, Drama",9.0,2700000,534858444',
    '3,Inception,2010,Movies,148,"Action, Adventure, Sci-Fi",8.8,2400000,292576195',
]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture()
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write a movies CSV with the standard header and return its path."""

    def _write(rows: list[str], *, name: str = "movies.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def fake_embedding() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture()
def memory_store(fake_embedding: DeterministicFakeEmbedding) -> InMemoryVectorStore:
    return InMemoryVectorStore(fake_embedding, collection_name="test-movies")


@pytest.fixture()
def sample_rows() -> list[str]:
    return list(SAMPLE_ROWS)


@pytest.fixture()
def csv_stream() -> Callable[..., io.BytesIO]:
    """Build an in-memory movies CSV byte stream; the header is added by default."""

    def _stream(*rows: str, header: str | None = HEADER) -> io.BytesIO:
        lines = [header, *rows] if header is not None else list(rows)
        return io.BytesIO(("\n".join(lines) + "\n").encode("utf-8"))

    return _stream
