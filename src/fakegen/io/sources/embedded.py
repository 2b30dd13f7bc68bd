"""Embedded data source backed by package resources.

Resources ship inside the ``fakegen`` package under ``data/`` and are
accessed through :mod:`importlib.resources`, so they resolve both from a
source checkout and from an installed wheel.
"""

from __future__ import annotations

from importlib import resources as importlib_resources
from importlib.resources.abc import Traversable
from pathlib import PurePosixPath


class EmbeddedSource:
    """Read resources bundled with a Python package."""

    name = "embedded"

    def __init__(self, package: str = "fakegen") -> None:
        self.package = package

    def _locate(self, path: PurePosixPath) -> Traversable:
        node = importlib_resources.files(self.package)
        for part in path.parts:
            node = node.joinpath(part)
        return node

    def read_bytes(self, path: PurePosixPath) -> bytes:
        node = self._locate(path)
        if node.is_dir():
            raise IsADirectoryError(str(path))
        if not node.is_file():
            raise FileNotFoundError(str(path))
        return node.read_bytes()

    def list_dirs(self, path: PurePosixPath) -> list[str]:
        node = self._locate(path)
        if not node.is_dir():
            return []
        return sorted(child.name for child in node.iterdir() if child.is_dir())

    def __repr__(self) -> str:
        return f"EmbeddedSource(package={self.package!r})"


__all__ = ["EmbeddedSource"]
