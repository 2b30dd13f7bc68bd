"""Data source protocol.

A data source maps slash separated resource paths such as
``data/en/cities`` to raw bytes.  Sources perform no decoding or splitting;
that is the job of :mod:`fakegen.samples.resolver`.

Sources must raise ``FileNotFoundError`` (or ``IsADirectoryError`` /
``NotADirectoryError``) when a resource is absent so that
:class:`fakegen.io.reader.ResourceReader` can tell absence apart from other
I/O failures.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Protocol, runtime_checkable


@runtime_checkable
class DataSource(Protocol):
    """Read-only access to a tree of sample resources."""

    name: str

    def read_bytes(self, path: PurePosixPath) -> bytes:
        """Return the raw content of the resource at ``path``."""

    def list_dirs(self, path: PurePosixPath) -> list[str]:
        """Return the names of the directories directly below ``path``."""


__all__ = ["DataSource"]
