"""Tests for the name based data source registry."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from fakegen.io import _SOURCES, available_sources, create_source, register_source
from fakegen.io.sources import DataSource, DirectorySource, EmbeddedSource
from fakegen.utils.errors import UnknownDataSourceError


def test_default_sources_registered() -> None:
    assert available_sources() == ["embedded", "external"]
    assert isinstance(create_source("embedded"), EmbeddedSource)
    assert isinstance(create_source("EXTERNAL", root="/tmp"), DirectorySource)


def test_unknown_source_raises() -> None:
    with pytest.raises(UnknownDataSourceError, match="Unknown data source: 'ftp'"):
        create_source("ftp")


def test_register_custom_source(monkeypatch: pytest.MonkeyPatch) -> None:
    class MemorySource:
        name = "memory"

        def read_bytes(self, path: PurePosixPath) -> bytes:
            return b"x"

        def list_dirs(self, path: PurePosixPath) -> list[str]:
            return []

    monkeypatch.setattr("fakegen.io._SOURCES", dict(_SOURCES))
    register_source("Memory", MemorySource)
    source = create_source("memory")
    assert isinstance(source, DataSource)
    assert source.read_bytes(PurePosixPath("data/en/x")) == b"x"


def test_embedded_source_reads_bundled_data() -> None:
    source = EmbeddedSource()
    raw = source.read_bytes(PurePosixPath("data/en/cities"))
    assert b"Springfield" in raw
    assert {"de", "en", "fr"}.issubset(source.list_dirs(PurePosixPath("data")))


def test_embedded_source_missing_and_directory() -> None:
    source = EmbeddedSource()
    with pytest.raises(FileNotFoundError):
        source.read_bytes(PurePosixPath("data/en/no_such_category"))
    with pytest.raises(IsADirectoryError):
        source.read_bytes(PurePosixPath("data/en"))
    assert source.list_dirs(PurePosixPath("data/xx")) == []


def test_directory_source(tmp_path: Path) -> None:
    (tmp_path / "data" / "en").mkdir(parents=True)
    (tmp_path / "data" / "en" / "colors").write_bytes(b"red\ngreen\n")
    (tmp_path / "data" / "notes.txt").write_text("not a language")
    source = DirectorySource(tmp_path)
    assert source.read_bytes(PurePosixPath("data/en/colors")) == b"red\ngreen\n"
    assert source.list_dirs(PurePosixPath("data")) == ["en"]
    with pytest.raises(FileNotFoundError):
        source.read_bytes(PurePosixPath("data/en/sizes"))


def test_directory_source_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert DirectorySource().root == tmp_path
