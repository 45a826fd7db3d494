"""CSV loader — turns the movies table into LangChain documents.

Every data row becomes one :class:`~langchain_core.documents.Document`
whose body lists each column as ``column:value`` on its own line and
whose metadata carries the same values plus ``source`` and ``row``.
"""

from __future__ import annotations

import csv
import io
import logging
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from langchain_core.documents import Document

from movie_muse.config import settings

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

MOVIE_COLUMNS: tuple[str, ...] = (
    "index",
    "movie_name",
    "year_of_release",
    "category",
    "run_time",
    "genre",
    "imdb_rating",
    "votes",
    "gross_total",
)
"""Fixed column order of the movies table.  The header is never inspected."""

DEFAULT_SOURCE = "movies.csv"


class ResourceNotFoundError(FileNotFoundError):
    """The movies CSV could not be located or opened."""


class MalformedRowError(ValueError):
    """A data row does not have exactly one value per column."""

    def __init__(self, line: int, field_count: int) -> None:
        super().__init__(
            f"Line {line}: expected {len(MOVIE_COLUMNS)} fields, got {field_count}"
        )
        self.line = line
        self.field_count = field_count


def parse_movie_csv(
    stream: BinaryIO,
    *,
    source: str = DEFAULT_SOURCE,
    drop_first_data_row: bool = False,
) -> list[Document]:
    """Parse a comma-delimited byte *stream* into one document per data row.

    Parameters
    ----------
    stream:
        Binary stream holding UTF-8 CSV with a header line.
    source:
        Value stored under the ``source`` metadata key.
    drop_first_data_row:
        Skip the first record after the header as well.

    Returns
    -------
    list[Document]
        Documents in source row order; ``row`` metadata counts from ``"1"``.

    Raises
    ------
    MalformedRowError
        If any row has the wrong number of fields.  Nothing is returned in
        that case.
    """
    text = io.TextIOWrapper(stream, encoding="utf-8", newline="")
    try:
        reader = csv.reader(text)
        to_skip = 2 if drop_first_data_row else 1

        documents: list[Document] = []
        for record in reader:
            # Blank lines carry no record.
            if not record:
                continue
            if to_skip:
                to_skip -= 1
                continue
            if len(record) != len(MOVIE_COLUMNS):
                raise MalformedRowError(reader.line_num, len(record))

            documents.append(_to_document(record, source=source, row=len(documents) + 1))
    finally:
        # The caller owns the underlying stream.
        text.detach()
    return documents


def load_movie_documents(
    resource: str | Path | None = None,
    *,
    drop_first_data_row: bool | None = None,
) -> list[Document]:
    """Load the movies table from *resource* (or the packaged copy).

    Raises
    ------
    ResourceNotFoundError
        If the CSV does not exist or cannot be opened.
    """
    if drop_first_data_row is None:
        drop_first_data_row = settings.drop_first_data_row

    path = _resolve_resource(resource)
    try:
        with path.open("rb") as stream:
            documents = parse_movie_csv(stream, drop_first_data_row=drop_first_data_row)
    except FileNotFoundError as exc:
        raise ResourceNotFoundError(f"Could not find {DEFAULT_SOURCE} at {path}") from exc
    except OSError as exc:
        raise ResourceNotFoundError(f"Could not open {DEFAULT_SOURCE} at {path}: {exc}") from exc

    logger.info("Loaded %d movie document(s) from %s", len(documents), path)
    return documents


def _to_document(record: list[str], *, source: str, row: int) -> Document:
    metadata: dict[str, str] = {"source": source, "row": str(row)}
    lines: list[str] = []
    for column, value in zip(MOVIE_COLUMNS, record):
        metadata[column] = value
        lines.append(f"{column}:{value}")
    return Document(page_content="\n".join(lines), metadata=metadata)


def _resolve_resource(resource: str | Path | None) -> Path | Traversable:
    if resource is not None:
        return Path(resource)
    if settings.movies_csv_path:
        return Path(settings.movies_csv_path)
    # Opened through importlib so zipped installs work too.
    return resources.files("movie_muse.data").joinpath(DEFAULT_SOURCE)
