"""Keyword lookups scoped to a single edition."""

from __future__ import annotations

from typing import Iterator, Optional

from rustkws.keywords import Keyword
from rustkws.model import Category, Edition, KeywordError


def category(edition: Edition, keyword: Keyword) -> Optional[Category]:
    """Return ``keyword``'s category in ``edition``, or None."""
    return keyword.category(edition)


def keyword(edition: Edition, value: str) -> Optional[Keyword]:
    """Return the keyword spelled ``value`` if it is one in ``edition``, else None."""
    try:
        found = Keyword.from_value(value)
    except KeywordError:
        return None
    return found if found.category(edition) is not None else None


def keywords(edition: Edition) -> Iterator[Keyword]:
    """Yield, in declaration order, every keyword that exists in ``edition``."""
    return (kw for kw in Keyword if kw.category(edition) is not None)