"""Fake data generator.

:class:`Generator` bundles everything needed to produce fake values: a
configuration object, a random number generator, a sample cache, a resource
reader and the language registry.  Each instance is independent, so two
generators configured for different languages can be used side by side.

Plain categories return one line of the backing resource::

    >>> gen = Generator()
    >>> gen.sample("cities")          # doctest: +SKIP
    'Springfield'

Template categories are looked up as ``<category>_format`` and every ``#`` is
replaced by a random digit::

    >>> gen.generate("phones")        # doctest: +SKIP
    '(555) 201-7734'

When a category is missing for the current language and fallback is enabled,
the English samples are used instead.  If nothing can be found, :meth:`sample`
and :meth:`generate` return an empty string while :meth:`lookup` and
:meth:`render` return ``None``.
"""

from __future__ import annotations

import os
import random
from pathlib import Path

from . import providers
from .config import ConfigModel, load_config
from .io.reader import ResourceReader
from .registry import LanguageRegistry, embedded_registry
from .samples.cache import SampleCache
from .samples.resolver import Reader, SampleResolver
from .samples.template import expand, format_category
from .utils.logging import get_logger

logger = get_logger(__name__)


class Generator:
    """Generate random samples for a configured language."""

    def __init__(
        self,
        cfg: ConfigModel | None = None,
        *,
        reader: Reader | None = None,
        registry: LanguageRegistry | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration to copy.  Defaults to :func:`fakegen.config.load_config`.
        reader:
            Object with a ``read(language, category) -> bytes`` method.  Defaults
            to a :class:`~fakegen.io.reader.ResourceReader` bound to the
            generator's configuration.
        registry:
            Language registry used to validate :meth:`set_language`.  Defaults
            to the languages bundled with the package.
        rng:
            Random number generator.  Defaults to ``random.Random(cfg.seed)``.

        Raises
        ------
        LanguageNotAvailableError
            If ``cfg.language`` is not in the registry.
        """

        config = (cfg if cfg is not None else load_config()).model_copy(deep=True)
        self.registry: LanguageRegistry = registry if registry is not None else embedded_registry()
        self.registry.require(config.language)
        self.config: ConfigModel = config
        self.rng: random.Random = rng if rng is not None else random.Random(config.seed)
        self.cache = SampleCache()
        self.reader: Reader = reader if reader is not None else ResourceReader(config)
        self.resolver = SampleResolver(self.reader, self.cache, rng=self.rng, config=config)

    # -- Configuration ----------------------------------------------------

    @property
    def language(self) -> str:
        return self.config.language

    def languages(self) -> list[str]:
        """Return the languages accepted by :meth:`set_language`."""

        return self.registry.languages()

    def set_language(self, language: str) -> None:
        """Switch the language used for subsequent lookups.

        Raises :class:`~fakegen.utils.errors.LanguageNotAvailableError` and
        leaves the current language unchanged if ``language`` is unknown.
        """

        self.registry.require(language)
        self.config.language = language
        logger.debug("language set to %s", language)

    def set_fallback(self, enabled: bool) -> None:
        """Allow or forbid falling back to English samples."""

        self.config.fallback = enabled

    def use_external_data(
        self, enabled: bool, root: str | os.PathLike[str] | None = None
    ) -> None:
        """Read resources from a directory on disk instead of the package.

        ``root`` replaces ``config.data.root`` when given.  Pools that are
        already cached keep being served from the cache.
        """

        self.config.data.external = enabled
        if root is not None:
            self.config.data.root = Path(root)

    # -- Lookups ----------------------------------------------------------

    def lookup(self, category: str) -> str | None:
        """Return one sample of ``category`` or ``None`` if none exists."""

        return self.resolver.resolve(self.config.language, category)

    def render(self, category: str) -> str | None:
        """Return an expanded ``<category>_format`` template or ``None``."""

        template = self.resolver.resolve(self.config.language, format_category(category))
        if template is None:
            return None
        return expand(template, self.rng)

    def sample(self, category: str) -> str:
        """Return one sample of ``category`` or ``""`` if none exists."""

        return self.lookup(category) or ""

    def generate(self, category: str) -> str:
        """Return an expanded ``<category>_format`` template or ``""``."""

        return self.render(category) or ""

    # -- Providers --------------------------------------------------------

    def male_first_name(self) -> str:
        return providers.male_first_name(self)

    def female_first_name(self) -> str:
        return providers.female_first_name(self)

    def first_name(self) -> str:
        return providers.first_name(self)

    def last_name(self) -> str:
        return providers.last_name(self)

    def full_name(self) -> str:
        return providers.full_name(self)

    def company(self) -> str:
        return providers.company(self)

    def city(self) -> str:
        return providers.city(self)

    def street_address(self) -> str:
        return providers.street_address(self)

    def zip_code(self) -> str:
        return providers.zip_code(self)

    def country(self) -> str:
        return providers.country(self)

    def phone(self) -> str:
        return providers.phone(self)

    def email_address(self) -> str:
        return providers.email_address(self)

    def __repr__(self) -> str:
        return (
            f"Generator(language={self.config.language!r}, "
            f"fallback={self.config.fallback}, external={self.config.data.external})"
        )


__all__ = ["Generator"]
