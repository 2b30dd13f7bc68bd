"""Name based registry of data sources.

Two sources are registered by default: ``"embedded"`` reads the resources
bundled with the package and ``"external"`` reads a directory on disk.  The
registry maps a source name to a factory; :func:`create_source` forwards
keyword arguments to that factory.

``UnknownDataSourceError`` is raised when asking for a name that has no
registered factory.
"""

from __future__ import annotations

from typing import Any, Callable

from ..utils.errors import UnknownDataSourceError
from .sources import DataSource, DirectorySource, EmbeddedSource

SourceFactory = Callable[..., DataSource]

_SOURCES: dict[str, SourceFactory] = {}


def register_source(name: str, factory: SourceFactory) -> None:
    """Register ``factory`` under ``name``.

    Parameters
    ----------
    name:
        Source name (e.g. ``"embedded"``).  Matching is case-insensitive.
    factory:
        Callable returning an object implementing
        :class:`~fakegen.io.sources.DataSource`.
    """

    _SOURCES[name.lower()] = factory


def available_sources() -> list[str]:
    """Return the registered source names in sorted order."""

    return sorted(_SOURCES)


def create_source(name: str, **kwargs: Any) -> DataSource:
    """Instantiate the source registered under ``name``.

    Raises
    ------
    UnknownDataSourceError
        If no factory is registered for ``name``.
    """

    factory = _SOURCES.get(name.lower())
    if factory is None:
        raise UnknownDataSourceError(f"Unknown data source: '{name}'") from None
    return factory(**kwargs)


register_source("embedded", EmbeddedSource)
register_source("external", DirectorySource)

__all__ = [
    "DataSource",
    "SourceFactory",
    "available_sources",
    "create_source",
    "register_source",
]
