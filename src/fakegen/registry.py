"""Registry of supported languages.

Languages are the directory names directly below ``data/`` in a data source.
The set is enumerated once when the registry is built; entries whose name
starts with ``_`` or ``.`` (package metadata, caches) are ignored.  Lookups
are exact: no case folding or aliasing is applied.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePosixPath

from .io.reader import DATA_ROOT
from .io.sources import DataSource, EmbeddedSource
from .utils.errors import LanguageNotAvailableError


class LanguageRegistry:
    """Immutable set of language identifiers read from a data source."""

    def __init__(self, source: DataSource) -> None:
        names = source.list_dirs(PurePosixPath(DATA_ROOT))
        self._languages: frozenset[str] = frozenset(
            name for name in names if not name.startswith(("_", "."))
        )

    def languages(self) -> list[str]:
        """Return the supported languages in sorted order."""

        return sorted(self._languages)

    def is_available(self, language: str) -> bool:
        return language in self._languages

    def require(self, language: str) -> str:
        """Return ``language`` or raise :class:`LanguageNotAvailableError`."""

        if language not in self._languages:
            raise LanguageNotAvailableError(language)
        return language

    def __contains__(self, language: object) -> bool:
        return language in self._languages

    def __len__(self) -> int:
        return len(self._languages)


@lru_cache(maxsize=1)
def embedded_registry() -> LanguageRegistry:
    """Return the registry of languages bundled with the package."""

    return LanguageRegistry(EmbeddedSource())


__all__ = ["LanguageRegistry", "embedded_registry"]
