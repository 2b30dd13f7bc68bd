"""Placeholder expansion for ``_format`` categories.

Templates are plain strings in which every ``#`` stands for one random digit,
e.g. ``"(###) ###-####"``.  All other characters are copied verbatim, so the
expanded value always has the same length as its template.
"""

from __future__ import annotations

import random

PLACEHOLDER = "#"
FORMAT_SUFFIX = "_format"


def format_category(category: str) -> str:
    """Return the name of the template category for ``category``."""

    return category + FORMAT_SUFFIX


def expand(template: str, rng: random.Random, *, placeholder: str = PLACEHOLDER) -> str:
    """Replace each ``placeholder`` in ``template`` with a random digit."""

    return "".join(str(rng.randint(0, 9)) if ch == placeholder else ch for ch in template)


__all__ = ["FORMAT_SUFFIX", "PLACEHOLDER", "expand", "format_category"]
