"""Concrete data sources: package-embedded resources and external directories."""

from .base import DataSource
from .embedded import EmbeddedSource
from .external import DirectorySource

__all__ = ["DataSource", "DirectorySource", "EmbeddedSource"]
