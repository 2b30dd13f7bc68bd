"""Address providers.

Street addresses combine a ``building_numbers`` template with a street name.
Postal codes come from the ``zips`` template of the current language.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.text import join

if TYPE_CHECKING:  # pragma: no cover
    from ..generator import Generator


def city(gen: Generator) -> str:
    return gen.sample("cities")


def country(gen: Generator) -> str:
    return gen.sample("countries")


def street_address(gen: Generator) -> str:
    """Return a building number followed by a street name."""

    return join(gen.generate("building_numbers"), gen.sample("streets"))


def zip_code(gen: Generator) -> str:
    return gen.generate("zips")


__all__ = ["city", "country", "street_address", "zip_code"]
