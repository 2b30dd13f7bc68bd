"""Typed exceptions for language selection, data sources and sample lookup."""

from __future__ import annotations


class FakegenError(Exception):
    """Base class for all fakegen errors."""


class LanguageNotAvailableError(FakegenError, ValueError):
    """Raised when a language is not present in the registry."""

    def __init__(self, language: str) -> None:
        super().__init__(f"The language passed ({language}) is not available")
        self.language = language


class ResourceNotFoundError(FakegenError, LookupError):
    """Raised when no resource exists for a ``(language, category)`` pair."""

    def __init__(self, language: str, category: str) -> None:
        super().__init__(f"No samples found for language: {language}")
        self.language = language
        self.category = category


class EmptyResourceError(ResourceNotFoundError):
    """Raised when a resource exists but yields no usable sample lines."""


class ResourceReadError(FakegenError):
    """Raised when a resource exists but cannot be read or decoded."""

    def __init__(self, language: str, category: str, reason: str) -> None:
        super().__init__(f"Cannot read samples for {language}/{category}: {reason}")
        self.language = language
        self.category = category


class UnknownDataSourceError(FakegenError, KeyError):
    """Raised when no data source is registered under a name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
