"""URL slug generation."""

from __future__ import annotations

import re

MAX_SLUG_LENGTH = 100
FALLBACK_SLUG = "untitled"

_WORD_REPLACEMENTS = (
    ("&", "and"),
    ("@", "at"),
    ("+", "plus"),
    ("#", "hash"),
    ("%", "percent"),
)
_INVALID_CHARS = re.compile(r"[^a-z0-9.\-]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def generate_slug(text: str) -> str:
    """Convert text to a lowercase, hyphenated, URL-safe slug.

    Only ASCII letters, digits, dots and hyphens survive; a few symbols are
    spelled out first so they are not lost entirely.

    Examples:
        >>> generate_slug("API & Docs")
        'api-and-docs'
        >>> generate_slug("C++ Programming")
        'cplusplus-programming'
        >>> generate_slug("Price: $99.99")
        'price-99.99'
        >>> generate_slug("")
        'untitled'

    """
    slug = text.lower().replace(" ", "-").replace("_", "-")
    for symbol, word in _WORD_REPLACEMENTS:
        slug = slug.replace(symbol, word)
    slug = _INVALID_CHARS.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
    return slug or FALLBACK_SLUG
