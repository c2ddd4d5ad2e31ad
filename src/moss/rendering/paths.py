"""Depth-aware relative paths for generated pages.

Every link a page emits is relative to that page, so the same output works
whether it is served from a domain root, a sub-path or opened from disk.
"""

from __future__ import annotations

from dataclasses import dataclass

CSS_FILE = "style.css"
JS_FILE = "js/theme.js"
FAVICON_FILE = "assets/favicon.svg"


@dataclass(frozen=True, slots=True)
class PathResolver:
    """Resolves root-relative asset and page paths for a page ``depth`` folders deep."""

    depth: int = 0

    @classmethod
    def for_url(cls, url_path: str) -> PathResolver:
        return cls(depth=url_path.count("/"))

    @property
    def prefix(self) -> str:
        return "../" * self.depth

    def asset_path(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def css_path(self) -> str:
        return self.asset_path(CSS_FILE)

    def js_path(self) -> str:
        return self.asset_path(JS_FILE)

    def favicon_path(self) -> str:
        return self.asset_path(FAVICON_FILE)

    def relative(self, url_path: str) -> str:
        """Link from the current page to ``url_path`` (given relative to the site root)."""
        return f"{self.prefix}{url_path}"

    def home_path(self) -> str:
        return self.prefix or "./"

    def generate_permalink(self, url_path: str) -> str:
        return f"/{self.prefix}{url_path}"
