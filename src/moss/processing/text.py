"""Lightweight text extraction from rendered HTML.

These helpers work on the HTML produced by the markdown renderer, which emits
bare ``<p>`` and ``<hN>`` tags, so simple patterns are enough.
"""

from __future__ import annotations

import html
import re

EXCERPT_LENGTH = 200
ELLIPSIS = "..."

_TAG = re.compile(r"<[^>]+>")
_TAG_SPLIT = re.compile(r"(<[^>]+>)")
_TAG_NAME = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)")
_VOID_TAGS = frozenset({"br", "hr", "img", "input", "wbr"})
_WHITESPACE = re.compile(r"\s+")
_FIRST_PARAGRAPH = re.compile(r"<p>(.*?)</p>", re.DOTALL)
_EMPHASIS_TAGS = re.compile(r"</?(?:strong|em)>")
_HEADINGS = {
    level: re.compile(rf"<h{level}(?:\s[^>]*)?>(.*?)</h{level}>", re.DOTALL | re.IGNORECASE)
    for level in (1, 2, 3)
}


def strip_tags(fragment: str) -> str:
    """Remove every tag and decode entities, leaving plain text."""
    return html.unescape(_TAG.sub("", fragment)).strip()


def _heading_text(html_content: str, level: int) -> str | None:
    match = _HEADINGS[level].search(html_content)
    if not match:
        return None
    return strip_tags(match.group(1)) or None


def extract_first_heading(html_content: str) -> str | None:
    """Return the text of the first h1, else h2, else h3, as plain text."""
    for level in (1, 2, 3):
        heading = _heading_text(html_content, level)
        if heading:
            return heading
    return None


def extract_h1(html_content: str) -> str | None:
    return _heading_text(html_content, 1)


def _truncate(fragment: str) -> str:
    """Cut ``fragment`` after ``EXCERPT_LENGTH`` visible characters.

    Tags do not count towards the length and are never split; any tag still
    open at the cut is closed so the excerpt stays well formed.
    """
    kept: list[str] = []
    open_tags: list[str] = []
    remaining = EXCERPT_LENGTH
    # split() with a capturing group puts tags at odd indexes.
    for index, piece in enumerate(_TAG_SPLIT.split(fragment)):
        if index % 2:
            tag = _TAG_NAME.match(piece)
            if tag:
                closing, name = tag.group(1), tag.group(2).lower()
                if closing and name in open_tags:
                    del open_tags[len(open_tags) - 1 - open_tags[::-1].index(name)]
                elif not closing and name not in _VOID_TAGS and not piece.endswith("/>"):
                    open_tags.append(name)
            kept.append(piece)
            continue
        if len(piece) > remaining:
            cut = piece[:remaining]
            amp = cut.rfind("&")
            if amp != -1 and ";" not in cut[amp:]:
                cut = cut[:amp]
            kept.append(cut)
            kept.extend(f"</{name}>" for name in reversed(open_tags))
            return "".join(kept) + ELLIPSIS
        kept.append(piece)
        remaining -= len(piece)
    return fragment


def extract_excerpt(html_content: str) -> str:
    """Return a short teaser for listings.

    Uses the first paragraph with emphasis tags removed (links are kept),
    falling back to the start of the de-tagged page when there is no
    paragraph at all.
    """
    match = _FIRST_PARAGRAPH.search(html_content)
    if match:
        return _truncate(_EMPHASIS_TAGS.sub("", match.group(1)).strip())

    plain = _WHITESPACE.sub(" ", _TAG.sub(" ", html_content)).strip()
    return _truncate(plain)


def strip_duplicate_h1(html_content: str, title: str) -> str:
    """Drop the first ``<h1>`` when it just repeats ``title``."""
    match = _HEADINGS[1].search(html_content)
    if match and strip_tags(match.group(1)) == title.strip():
        return (html_content[: match.start()] + html_content[match.end() :]).lstrip("\n")
    return html_content


def count_words(text: str) -> int:
    return len(text.split())
