"""Fake data generator with per-language sample pools.

The main entry point is :class:`fakegen.generator.Generator`.  For quick use
the module also exposes the same operations bound to a shared default
generator that is created on first use::

    import fakegen

    fakegen.set_language("fr")
    fakegen.full_name()
    fakegen.generate("phones")

The default generator is not synchronized for concurrent reconfiguration;
create one :class:`Generator` per thread or per configuration instead.
"""

from __future__ import annotations

import os
import threading

from .config import ConfigModel, load_config
from .generator import Generator
from .utils.errors import (
    EmptyResourceError,
    FakegenError,
    LanguageNotAvailableError,
    ResourceNotFoundError,
    ResourceReadError,
    UnknownDataSourceError,
)
from .utils.text import join

__version__ = "0.1.0"

_default: Generator | None = None
_default_lock = threading.Lock()


def default_generator() -> Generator:
    """Return the shared generator, creating it from the default config."""

    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Generator()
    return _default


def set_language(language: str) -> None:
    default_generator().set_language(language)


def set_fallback(enabled: bool) -> None:
    default_generator().set_fallback(enabled)


def use_external_data(enabled: bool, root: str | os.PathLike[str] | None = None) -> None:
    default_generator().use_external_data(enabled, root)


def languages() -> list[str]:
    return default_generator().languages()


def sample(category: str) -> str:
    return default_generator().sample(category)


def generate(category: str) -> str:
    return default_generator().generate(category)


def lookup(category: str) -> str | None:
    return default_generator().lookup(category)


def render(category: str) -> str | None:
    return default_generator().render(category)


def male_first_name() -> str:
    return default_generator().male_first_name()


def female_first_name() -> str:
    return default_generator().female_first_name()


def first_name() -> str:
    return default_generator().first_name()


def last_name() -> str:
    return default_generator().last_name()


def full_name() -> str:
    return default_generator().full_name()


def company() -> str:
    return default_generator().company()


def city() -> str:
    return default_generator().city()


def street_address() -> str:
    return default_generator().street_address()


def zip_code() -> str:
    return default_generator().zip_code()


def country() -> str:
    return default_generator().country()


def phone() -> str:
    return default_generator().phone()


def email_address() -> str:
    return default_generator().email_address()


__all__ = [
    "ConfigModel",
    "EmptyResourceError",
    "FakegenError",
    "Generator",
    "LanguageNotAvailableError",
    "ResourceNotFoundError",
    "ResourceReadError",
    "UnknownDataSourceError",
    "city",
    "company",
    "country",
    "default_generator",
    "email_address",
    "female_first_name",
    "first_name",
    "full_name",
    "generate",
    "join",
    "languages",
    "last_name",
    "load_config",
    "lookup",
    "male_first_name",
    "phone",
    "render",
    "sample",
    "set_fallback",
    "set_language",
    "street_address",
    "use_external_data",
    "zip_code",
]
