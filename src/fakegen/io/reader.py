"""Resource reader.

:class:`ResourceReader` turns a ``(language, category)`` pair into the path
``data/<language>/<category>`` and reads it from the data source selected by
the generator configuration.  The source is chosen on every read, so toggling
``config.data.external`` takes effect for the next cache miss.

Languages and categories must be single path components, so a lookup never
leaves ``data/``; anything else (absolute paths, ``..``, nested names) is a
miss.  Absence of a resource is reported as
:class:`~fakegen.utils.errors.ResourceNotFoundError` with the original
exception chained.  Any other I/O failure is reported as
:class:`~fakegen.utils.errors.ResourceReadError` and is not treated as a
miss by the resolver.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from ..config import ConfigModel
from ..utils.errors import ResourceNotFoundError, ResourceReadError
from ..utils.logging import get_logger
from . import create_source
from .sources import DataSource

DATA_ROOT = "data"

_MISSING = (FileNotFoundError, IsADirectoryError, NotADirectoryError)

logger = get_logger(__name__)


def is_resource_name(name: str) -> bool:
    """Return whether ``name`` is a single relative path component."""

    if name in ("", ".", "..") or "\\" in name or "\x00" in name:
        return False
    parts = PurePosixPath(name).parts
    return len(parts) == 1 and parts[0] == name


def resource_path(language: str, category: str) -> PurePosixPath:
    """Return the resource path for ``category`` in ``language``."""

    return PurePosixPath(DATA_ROOT, language, category)


class ResourceReader:
    """Read raw sample resources according to a configuration."""

    def __init__(self, config: ConfigModel) -> None:
        self.config = config
        self._embedded: DataSource | None = None
        self._external: DataSource | None = None
        self._external_root: Path | None = None

    def source(self) -> DataSource:
        """Return the data source selected by the current configuration."""

        if not self.config.data.external:
            if self._embedded is None:
                self._embedded = create_source("embedded")
            return self._embedded
        root = self.config.data.root
        if self._external is None or self._external_root != root:
            self._external = create_source("external", root=root)
            self._external_root = root
        return self._external

    def read(self, language: str, category: str) -> bytes:
        """Return the raw bytes stored for ``(language, category)``."""

        if not (is_resource_name(language) and is_resource_name(category)):
            raise ResourceNotFoundError(language, category)
        path = resource_path(language, category)
        source = self.source()
        try:
            data = source.read_bytes(path)
        except _MISSING as exc:
            raise ResourceNotFoundError(language, category) from exc
        except OSError as exc:
            raise ResourceReadError(language, category, str(exc)) from exc
        logger.debug("read %d bytes from %s:%s", len(data), source.name, path)
        return data


__all__ = ["DATA_ROOT", "ResourceReader", "is_resource_name", "resource_path"]
