"""Contact data providers: phone numbers and e-mail addresses."""

from __future__ import annotations

import re
import unicodedata
from typing import TYPE_CHECKING

from .person import first_name, last_name

if TYPE_CHECKING:  # pragma: no cover
    from ..generator import Generator

_NON_LOCAL = re.compile(r"[^a-z0-9]+")


def _local_part(text: str) -> str:
    # strip accents so "Hélène" becomes "helene"
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_only = decomposed.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_LOCAL.sub("", ascii_only)


def phone(gen: Generator) -> str:
    return gen.generate("phones")


def email_address(gen: Generator) -> str:
    """Return an address like ``"jane.smith@example.com"``."""

    user = ".".join(
        part for part in (_local_part(first_name(gen)), _local_part(last_name(gen))) if part
    )
    domain = gen.sample("email_domains")
    if not user or not domain:
        return ""
    return f"{user}@{domain}"


__all__ = ["email_address", "phone"]
