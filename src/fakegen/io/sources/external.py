"""Filesystem data source rooted at a user supplied directory.

The directory mirrors the embedded layout: ``<root>/data/<language>/<category>``.
``FileNotFoundError`` and other I/O errors propagate to the caller.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath


class DirectorySource:
    """Read resources from a directory on disk."""

    name = "external"

    def __init__(self, root: str | os.PathLike[str] | None = None) -> None:
        self.root = Path(root) if root is not None else Path.cwd()

    def read_bytes(self, path: PurePosixPath) -> bytes:
        return self.root.joinpath(*path.parts).read_bytes()

    def list_dirs(self, path: PurePosixPath) -> list[str]:
        base = self.root.joinpath(*path.parts)
        if not base.is_dir():
            return []
        return sorted(child.name for child in base.iterdir() if child.is_dir())

    def __repr__(self) -> str:
        return f"DirectorySource(root={str(self.root)!r})"


__all__ = ["DirectorySource"]
