"""In-memory sample cache.

The cache is a two level mapping ``language -> category -> pool`` owned by a
single :class:`~fakegen.generator.Generator`.  Entries are added on first
access and never removed or refreshed.  Population through
:meth:`SampleCache.get_or_load` is serialized by a lock so that concurrent
first lookups of the same pair read the underlying resource once.
"""

from __future__ import annotations

import threading
from typing import Callable

SamplePool = tuple[str, ...]


class SampleCache:
    """Append-only ``language -> category -> pool`` mapping."""

    def __init__(self) -> None:
        self._pools: dict[str, dict[str, SamplePool]] = {}
        self._lock = threading.Lock()

    def has(self, language: str, category: str) -> bool:
        return category in self._pools.get(language, {})

    def get(self, language: str, category: str) -> SamplePool | None:
        return self._pools.get(language, {}).get(category)

    def put(self, language: str, category: str, pool: SamplePool) -> None:
        self._pools.setdefault(language, {})[category] = tuple(pool)

    def get_or_load(
        self, language: str, category: str, loader: Callable[[], SamplePool]
    ) -> SamplePool:
        """Return the cached pool, calling ``loader`` once to populate a miss.

        Exceptions raised by ``loader`` propagate and leave the cache untouched.
        """

        pool = self.get(language, category)
        if pool is not None:
            return pool
        with self._lock:
            pool = self.get(language, category)
            if pool is None:
                pool = tuple(loader())
                self.put(language, category, pool)
            return pool

    def languages(self) -> list[str]:
        return sorted(self._pools)

    def categories(self, language: str) -> list[str]:
        return sorted(self._pools.get(language, {}))

    def __len__(self) -> int:
        return sum(len(cats) for cats in self._pools.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        language, category = key
        return self.has(language, category)


__all__ = ["SamplePool", "SampleCache"]
