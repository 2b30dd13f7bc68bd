"""Sample resolution: cache, lookup with fallback, and template expansion."""

from .cache import SampleCache, SamplePool
from .resolver import FALLBACK_LANGUAGE, SampleResolver, split_samples
from .template import FORMAT_SUFFIX, PLACEHOLDER, expand, format_category

__all__ = [
    "FALLBACK_LANGUAGE",
    "FORMAT_SUFFIX",
    "PLACEHOLDER",
    "SamplePool",
    "SampleCache",
    "SampleResolver",
    "expand",
    "format_category",
    "split_samples",
]
