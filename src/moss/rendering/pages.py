"""Main-content fragments for homepage, listing, topic and collection pages."""

from __future__ import annotations

import html
from collections import defaultdict
from typing import TYPE_CHECKING

from moss.processing.dates import format_date
from moss.processing.text import strip_duplicate_h1
from moss.rendering.navigation import entry_date, is_collection_member, newest_by_path, topic_labels, topic_url

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from moss.data_primitives import Document
    from moss.rendering.paths import PathResolver


def sort_newest_first(documents: Iterable[Document]) -> list[Document]:
    """Dated documents newest first, then undated ones alphabetically by display title.

    A date-prefixed file name counts as a date when the front matter has none.
    """
    docs = list(documents)
    dated = sorted((d for d in docs if entry_date(d)), key=lambda d: entry_date(d) or "", reverse=True)
    undated = sorted((d for d in docs if not entry_date(d)), key=lambda d: d.display_title.lower())
    return dated + undated


def group_by_topic(documents: Iterable[Document]) -> dict[str, list[Document]]:
    """Map each topic label to the documents tagged with it, labels sorted.

    Spellings that share a topic page are merged under the label
    ``topic_labels`` picks for that page.
    """
    docs = list(documents)
    groups: dict[str, list[Document]] = defaultdict(list)
    for doc in docs:
        for url_path in dict.fromkeys(topic_url(topic) for topic in doc.topics):
            groups[url_path].append(doc)
    return {label: groups[url_path] for url_path, label in topic_labels(docs).items()}


def collection_members(documents: Iterable[Document], folder: str) -> list[Document]:
    return [doc for doc in documents if doc.url_path.startswith(f"{folder}/")]


def article_meta(document: Document) -> str:
    parts = []
    if document.date:
        parts.append(f'<time datetime="{html.escape(document.date)}">{html.escape(format_date(document.date))}</time>')
    parts.append(f"{document.reading_time_minutes} min read")
    return f'<p class="article-meta">{" · ".join(parts)}</p>'


def entry_list(documents: Iterable[Document], resolver: PathResolver) -> str:
    """One ``<li>`` per document (date, then linked title), newest first."""
    rows = []
    for doc in sort_newest_first(documents):
        link = f'<a href="{resolver.relative(doc.url_path)}">{html.escape(doc.display_title)}</a>'
        raw_date = entry_date(doc)
        if raw_date:
            rows.append(f'<li><span class="entry-date">{html.escape(format_date(raw_date))}</span> — {link}</li>')
        else:
            rows.append(f"<li>{link}</li>")
    if not rows:
        return '<p class="no-posts">No posts yet</p>'
    return f'<ul class="entry-list">{"".join(rows)}</ul>'


def _feed_entry(document: Document, resolver: PathResolver) -> str:
    href = resolver.relative(document.url_path)
    raw_date = entry_date(document)
    date_display = html.escape(format_date(raw_date)) if raw_date else ""
    return f"""
                <article class="blog-entry">
                    <header class="blog-entry-header">
                        <h2 class="blog-entry-title"><a href="{href}">{html.escape(document.display_title)}</a></h2>
                        <time class="blog-entry-date">{date_display}</time>
                    </header>
                    <div class="blog-entry-excerpt">
                        <p>{document.excerpt}</p>
                        <p><a href="{href}" class="read-more">Read more →</a></p>
                    </div>
                </article>"""


def homepage_content(
    homepage: Document,
    documents: Sequence[Document],
    content_folders: Iterable[str],
    resolver: PathResolver,
) -> str:
    """The homepage's own body followed by a newest-first feed of collection entries."""
    body = strip_duplicate_h1(homepage.html_content, homepage.title)
    folders = frozenset(content_folders)
    entries = newest_by_path(doc for doc in documents if is_collection_member(doc.url_path, folders))
    if not entries:
        return body

    feed = "\n".join(_feed_entry(doc, resolver) for doc in entries)
    return f"""{body}
        <hr>
        <section class="blog-feed">
            <h2>Recent Posts</h2>
            {feed}
        </section>"""


def listing_content(documents: Iterable[Document], resolver: PathResolver) -> str:
    """``All Posts`` table used as the index when there is no homepage document."""
    rows = []
    for doc in newest_by_path(documents):
        topics = ", ".join(html.escape(t) for t in doc.topics) or "-"
        date = html.escape(format_date(doc.date)) if doc.date else "-"
        rows.append(
            f'<tr><td><a href="{resolver.relative(doc.url_path)}">{html.escape(doc.display_title)}</a></td>'
            f"<td>{date}</td><td>{topics}</td><td>{doc.reading_time_minutes} min</td></tr>"
        )

    if not rows:
        table = "<p>No posts yet.</p>"
    else:
        body = "\n".join(rows)
        table = (
            '<table class="content-table">\n'
            "<thead><tr><th>Title</th><th>Date</th><th>Topics</th><th>Reading Time</th></tr></thead>\n"
            f"<tbody>\n{body}\n</tbody>\n</table>"
        )
    return f"<h1>All Posts</h1>\n{table}"


def topics_section(topics_inline: str) -> str:
    if not topics_inline:
        return ""
    return f"""
            <section class="topics">
                <h3>Topics</h3>
                {topics_inline}
            </section>"""


def collection_breadcrumb(collection: str) -> str:
    return f'<nav class="breadcrumb">{html.escape(collection)}</nav>'
