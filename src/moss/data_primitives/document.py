"""The parsed representation of a single markdown source file."""

from __future__ import annotations

from dataclasses import dataclass, field

HOMEPAGE_URL = "index.html"


@dataclass(frozen=True, slots=True)
class Document:
    """One parsed markdown file, ready to be placed in a page template.

    ``url_path`` is relative to the output root and uses ``/`` separators.
    Directory depth is always derived from it, never stored.
    """

    source_path: str
    title: str
    raw_content: str
    html_content: str
    url_path: str
    slug: str
    permalink: str
    display_title: str
    excerpt: str
    reading_time_minutes: int = 1
    date: str | None = None
    topics: tuple[str, ...] = field(default_factory=tuple)
    weight: int | None = None
    github_url: str | None = None
    head_scripts: str | None = None

    @property
    def depth(self) -> int:
        return self.url_path.count("/")

    @property
    def is_homepage(self) -> bool:
        return self.url_path == HOMEPAGE_URL

    @property
    def collection(self) -> str | None:
        """Top-level folder of the output path, or None for root pages."""
        if "/" not in self.url_path:
            return None
        return self.url_path.split("/", 1)[0]

    @property
    def file_name(self) -> str:
        return self.url_path.rsplit("/", 1)[-1]
