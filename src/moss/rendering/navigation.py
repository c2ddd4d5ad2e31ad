"""Navigation fragments shared by every generated page.

Handles:
- The main navigation bar (site name, page links, theme toggle, GitHub link)
- Breadcrumbs for collection articles
- The "latest entry" sidebar
- The inline topic list
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from moss.processing.dates import date_from_filename, format_month
from moss.processing.slugs import generate_slug

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from moss.data_primitives import Document
    from moss.rendering.paths import PathResolver

MENU_ICON = (
    '<button class="mobile-menu-button" onclick="toggleMobileMenu()" aria-label="Toggle menu">'
    '<svg viewBox="0 0 24 24" width="24" height="24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round"><line x1="3" y1="12" x2="21" y2="12"/>'
    '<line x1="3" y1="6" x2="21" y2="6"/><line x1="3" y1="18" x2="21" y2="18"/></svg></button>'
)
THEME_TOGGLE = (
    '<button class="theme-toggle" onclick="toggleTheme()" aria-label="Toggle dark mode">'
    '<svg class="sun-icon" viewBox="0 0 24 24" width="20" height="20" fill="none" stroke="currentColor" '
    'stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><circle cx="12" cy="12" r="5"/>'
    '<line x1="12" y1="1" x2="12" y2="3"/><line x1="12" y1="21" x2="12" y2="23"/>'
    '<line x1="4.22" y1="4.22" x2="5.64" y2="5.64"/><line x1="18.36" y1="18.36" x2="19.78" y2="19.78"/>'
    '<line x1="1" y1="12" x2="3" y2="12"/><line x1="21" y1="12" x2="23" y2="12"/>'
    '<line x1="4.22" y1="19.78" x2="5.64" y2="18.36"/><line x1="18.36" y1="5.64" x2="19.78" y2="4.22"/></svg>'
    '<svg class="moon-icon" viewBox="0 0 24 24" width="20" height="20" fill="none" stroke="currentColor" '
    'stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M21 12.79A9 9 0 1 1 11.21 3 7 7 0 0 0 21 12.79z"/></svg></button>'
)
GITHUB_ICON = (
    '<svg viewBox="0 0 16 16" width="20" height="20" fill="currentColor"><path d="M8 0C3.58 0 0 3.58 0 8c0 '
    "3.54 2.29 6.53 5.47 7.59.4.07.55-.17.55-.38 0-.19-.01-.82-.01-1.49-2.01.37-2.53-.49-2.69-.94-.09-.23-.48"
    "-.94-.82-1.13-.28-.15-.68-.52-.01-.53.63-.01 1.08.58 1.23.82.72 1.21 1.87.87 2.33.66.07-.52.28-.87.51-1.07"
    "-1.78-.2-3.64-.89-3.64-3.95 0-.87.31-1.59.82-2.15-.08-.2-.36-1.02.08-2.12 0 0 .67-.21 2.2.82.64-.18 1.32-.27"
    " 2-.27.68 0 1.36.09 2 .27 1.53-1.04 2.2-.82 2.2-.82.44 1.1.16 1.92.08 2.12.51.56.82 1.27.82 2.15 0 3.07-1.87"
    " 3.75-3.65 3.95.29.25.54.73.54 1.48 0 1.07-.01 1.93-.01 2.2 0 .21.15.46.55.38A8.013 8.013 0 0016 8c0-4.42"
    '-3.58-8-8-8z"/></svg>'
)
NO_POSTS = '<p class="no-posts">No posts yet</p>'


def topic_url(topic: str) -> str:
    return f"topics/{generate_slug(topic)}.html"


def topic_labels(documents: Iterable[Document]) -> dict[str, str]:
    """Map each topic page path to the label shown for it, sorted by label.

    Topics that slugify alike (``Python`` and ``python``) share one page; the
    first spelling seen names it.
    """
    labels: dict[str, str] = {}
    for doc in documents:
        for topic in doc.topics:
            labels.setdefault(topic_url(topic), topic)
    return dict(sorted(labels.items(), key=lambda item: item[1]))


def is_collection_member(url_path: str, content_folders: Iterable[str]) -> bool:
    return any(url_path.startswith(f"{folder}/") for folder in content_folders)


def entry_month_label(document: Document) -> str:
    """``YYYY · MM`` from the front matter date, else from a date-prefixed file name."""
    if document.date:
        return format_month(document.date)
    filename_date = date_from_filename(document.file_name)
    if filename_date:
        return format_month(filename_date)
    return ""


def entry_date(document: Document) -> str | None:
    """Raw ``YYYY-MM-DD`` date of an entry, from front matter or its file name."""
    return document.date or date_from_filename(document.file_name)


def newest_by_path(documents: Iterable[Document]) -> list[Document]:
    # Collection files are date-prefixed, so reverse path order is newest first.
    return sorted(documents, key=lambda doc: doc.url_path, reverse=True)


class NavigationBuilder:
    """Builds navigation fragments for one page.

    ``resolver`` is the page's own ``PathResolver``; every href it emits is
    relative to that page.
    """

    def __init__(
        self,
        documents: Sequence[Document],
        site_title: str,
        resolver: PathResolver,
        *,
        content_folders: Iterable[str] = (),
        current_url: str | None = None,
        github_url: str | None = None,
    ) -> None:
        self.documents = documents
        self.site_title = site_title
        self.resolver = resolver
        self.content_folders = frozenset(content_folders)
        self.current_url = current_url
        self.github_url = github_url

    def _nav_documents(self) -> list[Document]:
        pages = [
            doc
            for doc in self.documents
            if not doc.is_homepage and not is_collection_member(doc.url_path, self.content_folders)
        ]
        # Weighted pages first (ascending), the rest alphabetically.
        return sorted(
            pages,
            key=lambda doc: (doc.weight is None, doc.weight or 0, doc.display_title.lower()),
        )

    def main_navigation(self) -> str:
        site_name = (
            f'<div class="nav-left"><a href="{self.resolver.home_path()}" class="site-name">'
            f"{html.escape(self.site_title)}</a></div>"
        )

        links = []
        for doc in self._nav_documents():
            active = ' class="active"' if doc.url_path == self.current_url else ""
            links.append(
                f'<a href="{self.resolver.relative(doc.url_path)}"{active}>{html.escape(doc.display_title)}</a>'
            )
        nav_links = f'<div class="nav-links">{"".join(links)}</div>' if links else ""

        icons = ['<span class="nav-divider"></span>', THEME_TOGGLE]
        if self.github_url:
            icons.append(
                f'<a href="{html.escape(self.github_url)}" class="github-link" aria-label="GitHub Repository" '
                f'target="_blank" rel="noopener">{GITHUB_ICON}</a>'
            )
        nav_icons = f'<div class="nav-icons">{"".join(icons)}</div>'

        return f'{site_name}<div class="nav-right">{MENU_ICON}{nav_links}{nav_icons}</div>'

    def breadcrumb(self, document: Document) -> str:
        """``folder / title`` trail linking back to the enclosing collection index."""
        parts = document.url_path.split("/")
        if len(parts) < 2:  # noqa: PLR2004
            return ""
        depth = self.resolver.depth
        folder_link = "./" if depth <= 1 else f"{'../' * (depth - 1)}index.html"
        return (
            f'<nav class="breadcrumb"><a href="{folder_link}">{html.escape(parts[0])}</a>'
            f" / {html.escape(document.display_title)}</nav>"
        )

    def latest_sidebar(self) -> str:
        """The single most recent entry across all content collections."""
        entries = newest_by_path(
            doc for doc in self.documents if is_collection_member(doc.url_path, self.content_folders)
        )
        if not entries:
            return NO_POSTS

        latest = entries[0]
        current_folder = self.current_url.split("/", 1)[0] if self.current_url and "/" in self.current_url else None
        if self.resolver.depth == 1 and latest.collection == current_folder:
            href = latest.file_name
        else:
            href = self.resolver.relative(latest.url_path)

        label = entry_month_label(latest)
        date_span = f'<span class="date">{html.escape(label)}</span>&nbsp;&nbsp;' if label else ""
        return f'<p>{date_span}<a href="{href}">{html.escape(latest.display_title)}</a></p>'

    def topics_inline(self) -> str:
        """Comma-separated links to every topic page, or an empty string when there are none."""
        topics = topic_labels(self.documents)
        if not topics:
            return ""
        links = [
            f'<a href="{self.resolver.relative(url_path)}">{html.escape(label)}</a>'
            for url_path, label in topics.items()
        ]
        return f'<p class="topic-tags">{", ".join(links)}</p>'
