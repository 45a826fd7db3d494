"""Unit tests for the movies CSV loader."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path

import pytest

from movie_muse.config import settings
from movie_muse.ingestion import loader
from movie_muse.ingestion.loader import (
    DEFAULT_SOURCE,
    MOVIE_COLUMNS,
    MalformedRowError,
    ResourceNotFoundError,
    load_movie_documents,
    parse_movie_csv,
)


@pytest.fixture()
def godfather(sample_rows: list[str]) -> str:
    return sample_rows[0]


# ── parse_movie_csv ────────────────────────────────────────────────────


class TestParseMovieCsv:
    def test_one_document_per_data_row(self, csv_stream, sample_rows) -> None:
        docs = parse_movie_csv(csv_stream(*sample_rows))
        assert len(docs) == len(sample_rows)

    def test_rows_keep_source_order(self, csv_stream, sample_rows) -> None:
        docs = parse_movie_csv(csv_stream(*sample_rows))
        assert [d.metadata["movie_name"] for d in docs] == [
            "The Godfather",
            "The Dark Knight",
            "Inception",
        ]

    def test_metadata_has_exactly_eleven_keys(self, csv_stream, sample_rows) -> None:
        docs = parse_movie_csv(csv_stream(*sample_rows))
        expected = {"source", "row", *MOVIE_COLUMNS}
        for doc in docs:
            assert set(doc.metadata) == expected
            assert len(doc.metadata) == 11

    def test_row_numbers_start_at_one(self, csv_stream, sample_rows) -> None:
        docs = parse_movie_csv(csv_stream(*sample_rows))
        assert [d.metadata["row"] for d in docs] == ["1", "2", "3"]

    def test_source_is_fixed_name(self, csv_stream, godfather) -> None:
        docs = parse_movie_csv(csv_stream(godfather))
        assert docs[0].metadata["source"] == DEFAULT_SOURCE == "movies.csv"

    def test_body_lists_every_column_in_order(self, csv_stream, godfather) -> None:
        docs = parse_movie_csv(csv_stream(godfather))
        lines = docs[0].page_content.split("\n")
        assert lines == [
            "index:1",
            "movie_name:The Godfather",
            "year_of_release:1972",
            "category:Movies",
            "run_time:175",
            "genre:Crime",
            "imdb_rating:9.2",
            "votes:1900000",
            "gross_total:134966411",
        ]

    def test_quoted_fields_keep_embedded_commas(self, csv_stream, sample_rows) -> None:
        docs = parse_movie_csv(csv_stream(sample_rows[1]))
        assert docs[0].metadata["genre"] == "Action, Crime, Drama"
        assert "genre:Action, Crime, Drama" in docs[0].page_content.split("\n")

    def test_values_are_not_converted(self, csv_stream, godfather) -> None:
        docs = parse_movie_csv(csv_stream(godfather))
        assert docs[0].metadata["year_of_release"] == "1972"
        assert docs[0].metadata["imdb_rating"] == "9.2"

    def test_header_is_not_inspected(self, csv_stream, godfather) -> None:
        docs = parse_movie_csv(csv_stream(godfather, header="a,b,c"))
        assert docs[0].metadata["movie_name"] == "The Godfather"

    def test_header_only_yields_nothing(self, csv_stream) -> None:
        assert parse_movie_csv(csv_stream()) == []

    def test_empty_stream_yields_nothing(self) -> None:
        assert parse_movie_csv(io.BytesIO(b"")) == []

    def test_blank_lines_are_ignored(self, csv_stream, sample_rows) -> None:
        docs = parse_movie_csv(csv_stream("", sample_rows[0], "", sample_rows[2]))
        assert [d.metadata["row"] for d in docs] == ["1", "2"]
        assert docs[1].metadata["movie_name"] == "Inception"

    def test_custom_source(self, csv_stream, godfather) -> None:
        docs = parse_movie_csv(csv_stream(godfather), source="top100.csv")
        assert docs[0].metadata["source"] == "top100.csv"

    def test_caller_stream_stays_open(self, csv_stream, godfather) -> None:
        stream = csv_stream(godfather)
        parse_movie_csv(stream)
        assert not stream.closed


class TestMalformedRows:
    def test_too_few_fields(self, csv_stream, godfather) -> None:
        with pytest.raises(MalformedRowError) as excinfo:
            parse_movie_csv(csv_stream(godfather, "2,Short,2001"))
        assert excinfo.value.line == 3
        assert excinfo.value.field_count == 3

    def test_too_many_fields(self, csv_stream, godfather) -> None:
        with pytest.raises(MalformedRowError):
            parse_movie_csv(csv_stream(godfather + ",extra"))

    def test_is_a_value_error(self, csv_stream) -> None:
        with pytest.raises(ValueError, match="expected 9 fields"):
            parse_movie_csv(csv_stream("1,2"))


class TestDropFirstDataRow:
    def test_godfather_only_row_is_kept_by_default(self, csv_stream, godfather) -> None:
        docs = parse_movie_csv(csv_stream(godfather))
        assert len(docs) == 1
        assert docs[0].metadata["row"] == "1"
        assert docs[0].metadata["movie_name"] == "The Godfather"

    def test_godfather_only_row_is_dropped_in_legacy_mode(self, csv_stream, godfather) -> None:
        assert parse_movie_csv(csv_stream(godfather), drop_first_data_row=True) == []

    def test_legacy_mode_renumbers_from_one(self, csv_stream, godfather) -> None:
        filler = "0,Placeholder,1900,Movies,1,None,0.0,0,0"
        docs = parse_movie_csv(csv_stream(filler, godfather), drop_first_data_row=True)
        assert len(docs) == 1
        assert docs[0].metadata["row"] == "1"
        assert docs[0].metadata["movie_name"] == "The Godfather"


# ── load_movie_documents ───────────────────────────────────────────────


class TestLoadMovieDocuments:
    def test_loads_from_path(self, write_csv, sample_rows) -> None:
        assert len(load_movie_documents(write_csv(sample_rows))) == 3

    def test_accepts_string_path(self, write_csv, sample_rows) -> None:
        assert len(load_movie_documents(str(write_csv(sample_rows)))) == 3

    def test_missing_resource(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceNotFoundError, match="movies.csv"):
            load_movie_documents(tmp_path / "nope.csv")

    def test_missing_resource_is_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_movie_documents(tmp_path / "nope.csv")

    def test_directory_is_not_a_resource(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceNotFoundError):
            load_movie_documents(tmp_path)

    def test_stream_closed_after_malformed_row(
        self, tmp_path: Path, csv_stream, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        stream = csv_stream("1,broken")
        monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: stream)
        with pytest.raises(MalformedRowError):
            load_movie_documents(tmp_path / "movies.csv")
        assert stream.closed

    def test_stream_closed_after_success(
        self, tmp_path: Path, csv_stream, godfather, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        stream = csv_stream(godfather)
        monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: stream)
        load_movie_documents(tmp_path / "movies.csv")
        assert stream.closed

    def test_settings_drive_legacy_skip(
        self, write_csv, sample_rows, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "drop_first_data_row", True)
        docs = load_movie_documents(write_csv(sample_rows))
        assert [d.metadata["movie_name"] for d in docs] == ["The Dark Knight", "Inception"]

    def test_explicit_flag_beats_settings(
        self, write_csv, sample_rows, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "drop_first_data_row", True)
        docs = load_movie_documents(write_csv(sample_rows), drop_first_data_row=False)
        assert len(docs) == 3

    def test_settings_path_used_when_no_resource(
        self, write_csv, sample_rows, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, "movies_csv_path", str(write_csv(sample_rows[:1])))
        assert len(load_movie_documents()) == 1

    def test_packaged_resource(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "movies_csv_path", "")
        docs = load_movie_documents(drop_first_data_row=False)
        assert len(docs) == 30
        assert docs[0].metadata["row"] == "1"
        assert docs[1].metadata["movie_name"] == "The Godfather"
        assert all(len(d.page_content.split("\n")) == 9 for d in docs)

    def test_packaged_resource_inside_zip(
        self, tmp_path: Path, sample_rows, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        archive = tmp_path / "movie_muse.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr(
                "movie_muse/data/movies.csv",
                "\n".join([",".join(MOVIE_COLUMNS), *sample_rows]) + "\n",
            )
        monkeypatch.setattr(settings, "movies_csv_path", "")
        monkeypatch.setattr(
            loader.resources,
            "files",
            lambda package: zipfile.Path(archive, "movie_muse/data/"),
        )

        docs = load_movie_documents(drop_first_data_row=False)
        assert [d.metadata["movie_name"] for d in docs] == [
            "The Godfather",
            "The Dark Knight",
            "Inception",
        ]
