"""Markdown to HTML rendering with source-link rewriting.

Documents link to each other by their markdown file names, but the generated
site serves ``.html``; a core rule rewrites those hrefs while rendering.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import unquote

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin

from moss.processing.slugs import generate_slug

if TYPE_CHECKING:
    from markdown_it.rules_core import StateCore

MARKDOWN_LINK_SUFFIXES = (".markdown", ".md")

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def transform_markdown_link(url: str) -> str:
    """Point a relative link at a markdown source to its generated HTML page.

    The target's file name is slugified the same way output pages are named,
    so ``About.md`` links to ``about.html``. External links (any scheme or
    protocol-relative ``//``), pure fragments and links that do not target a
    markdown file are returned unchanged.

    Examples:
        >>> transform_markdown_link("./guide.md#setup")
        './guide.html#setup'
        >>> transform_markdown_link("../notes/My%20Notes.md")
        '../notes/my-notes.html'
        >>> transform_markdown_link("https://example.com/readme.md")
        'https://example.com/readme.md'

    """
    if not url or url.startswith(("#", "//")) or _SCHEME.match(url):
        return url

    path, hash_sep, fragment = url.partition("#")
    path, query_sep, query = path.partition("?")
    lowered = path.lower()
    for suffix in MARKDOWN_LINK_SUFFIXES:
        if lowered.endswith(suffix):
            folder, _, name = path.rpartition("/")
            stem = name[: -len(suffix)]
            # Must match compute_url_path in moss.processing.processor.
            file_name = f"{generate_slug(unquote(stem))}.html"
            path = f"{folder}/{file_name}" if folder or path.startswith("/") else file_name
            break
    return f"{path}{query_sep}{query}{hash_sep}{fragment}"


def _rewrite_links(state: StateCore) -> None:
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if child.type != "link_open":
                continue
            href = child.attrGet("href")
            if isinstance(href, str):
                child.attrSet("href", transform_markdown_link(href))


def create_renderer() -> MarkdownIt:
    """Build the renderer: CommonMark plus tables, strikethrough and footnotes."""
    md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"]).use(footnote_plugin)
    md.core.ruler.push("rewrite_markdown_links", _rewrite_links)
    return md


_md = create_renderer()


def render_markdown(content: str) -> str:
    """Render markdown ``content`` to an HTML fragment."""
    return _md.render(content)
