"""Person name providers.

Names are drawn from gendered first name pools and a shared last name pool.
:func:`full_name` keeps first and last name in the same language because both
come from the generator's current language (or its English fallback).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.text import join

if TYPE_CHECKING:  # pragma: no cover
    from ..generator import Generator


def male_first_name(gen: Generator) -> str:
    return gen.sample("male_first_names")


def female_first_name(gen: Generator) -> str:
    return gen.sample("female_first_names")


def first_name(gen: Generator) -> str:
    """Return a first name of either gender."""

    if gen.rng.random() < 0.5:
        return male_first_name(gen)
    return female_first_name(gen)


def last_name(gen: Generator) -> str:
    return gen.sample("last_names")


def full_name(gen: Generator) -> str:
    return join(first_name(gen), last_name(gen))


__all__ = ["female_first_name", "first_name", "full_name", "last_name", "male_first_name"]
