"""Company name provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.text import join

if TYPE_CHECKING:  # pragma: no cover
    from ..generator import Generator


def company(gen: Generator) -> str:
    """Return a company name such as ``"Blue Harbor Inc"``."""

    return join(gen.sample("companies"), gen.sample("company_suffixes"))


__all__ = ["company"]
