"""Small string helpers shared by providers."""

from __future__ import annotations

__all__ = ["join"]


def join(*parts: str) -> str:
    """Join the non-empty ``parts`` with single spaces."""

    return " ".join(part for part in parts if part != "")
