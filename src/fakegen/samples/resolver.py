"""Sample lookup with lazy cache population and English fallback.

Resolution of ``(language, category)``:

1. If the cache holds a pool for the pair, pick one sample uniformly.
2. Otherwise read the resource, split it into a pool, cache it and pick.
3. If the resource does not exist and fallback is allowed both for this call
   and by the generator configuration, resolve the same category in
   :data:`FALLBACK_LANGUAGE` with fallback disabled.  The hop is never
   repeated.
4. Otherwise report a miss by returning ``None``.

Only :class:`~fakegen.utils.errors.ResourceNotFoundError` counts as a miss.
Read and decode failures propagate to the caller.
"""

from __future__ import annotations

import random
from typing import Protocol

from ..config import ConfigModel
from ..utils.errors import EmptyResourceError, ResourceNotFoundError, ResourceReadError
from ..utils.logging import get_logger
from .cache import SampleCache, SamplePool

FALLBACK_LANGUAGE = "en"

logger = get_logger(__name__)


class Reader(Protocol):
    def read(self, language: str, category: str) -> bytes: ...


def split_samples(raw: str) -> SamplePool:
    """Split decoded resource text into a pool of non-empty lines."""

    lines = (line.rstrip("\r") for line in raw.strip().split("\n"))
    return tuple(line for line in lines if line)


class SampleResolver:
    """Resolve categories to random samples through a :class:`SampleCache`."""

    def __init__(
        self,
        reader: Reader,
        cache: SampleCache,
        *,
        rng: random.Random,
        config: ConfigModel,
    ) -> None:
        self.reader = reader
        self.cache = cache
        self.rng = rng
        self.config = config

    def load_pool(self, language: str, category: str) -> SamplePool:
        """Read and split the pool for a pair without touching the cache."""

        raw = self.reader.read(language, category)
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ResourceReadError(language, category, str(exc)) from exc
        pool = split_samples(text)
        if not pool:
            raise EmptyResourceError(language, category)
        logger.debug("cached %d samples for %s/%s", len(pool), language, category)
        return pool

    def pool(self, language: str, category: str) -> SamplePool:
        """Return the cached pool for a pair, populating it on first use."""

        return self.cache.get_or_load(
            language, category, lambda: self.load_pool(language, category)
        )

    def resolve(self, language: str, category: str, allow_fallback: bool = True) -> str | None:
        """Return one random sample of ``category`` or ``None`` on a miss."""

        try:
            samples = self.pool(language, category)
        except ResourceNotFoundError:
            if language != FALLBACK_LANGUAGE and allow_fallback and self.config.fallback:
                logger.debug(
                    "no %s samples for %s, falling back to %s",
                    category,
                    language,
                    FALLBACK_LANGUAGE,
                )
                return self.resolve(FALLBACK_LANGUAGE, category, allow_fallback=False)
            logger.debug("no %s samples for %s", category, language)
            return None
        return self.rng.choice(samples)


__all__ = ["FALLBACK_LANGUAGE", "Reader", "SampleResolver", "split_samples"]
