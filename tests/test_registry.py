from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from fakegen.registry import LanguageRegistry, embedded_registry
from fakegen.utils.errors import LanguageNotAvailableError


class ListingSource:
    name = "listing"

    def __init__(self, dirs: list[str]) -> None:
        self.dirs = dirs
        self.calls = 0

    def read_bytes(self, path: PurePosixPath) -> bytes:
        raise FileNotFoundError(str(path))

    def list_dirs(self, path: PurePosixPath) -> list[str]:
        assert path == PurePosixPath("data")
        self.calls += 1
        return list(self.dirs)


def test_embedded_languages() -> None:
    registry = embedded_registry()
    assert registry.languages() == ["de", "en", "fr"]
    assert registry is embedded_registry()


def test_metadata_entries_are_excluded() -> None:
    registry = LanguageRegistry(ListingSource(["en", "__pycache__", ".git", "_meta", "pt"]))
    assert registry.languages() == ["en", "pt"]
    assert len(registry) == 2


def test_enumerated_once_and_stable() -> None:
    source = ListingSource(["fr", "en"])
    registry = LanguageRegistry(source)
    first = registry.languages()
    source.dirs.append("de")
    assert registry.languages() == first == ["en", "fr"]
    assert source.calls == 1


def test_require_is_exact_membership() -> None:
    registry = LanguageRegistry(ListingSource(["en", "fr"]))
    assert registry.require("fr") == "fr"
    assert registry.is_available("en")
    assert "fr" in registry
    with pytest.raises(LanguageNotAvailableError) as excinfo:
        registry.require("FR")
    assert excinfo.value.language == "FR"
    assert str(excinfo.value) == "The language passed (FR) is not available"
