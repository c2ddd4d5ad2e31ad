"""Turn one markdown source file into a ``Document``."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from moss.data_primitives import HOMEPAGE_URL, Document
from moss.processing.frontmatter import parse_frontmatter
from moss.processing.markdown import render_markdown
from moss.processing.slugs import generate_slug
from moss.processing.text import count_words, extract_excerpt, extract_first_heading, extract_h1
from moss.rendering.paths import PathResolver

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
HOMEPAGE_SOURCE_NAMES = frozenset({"index.md", "readme.md"})


def filename_title(file_path: str) -> str:
    """Title derived from the file name alone: ``my_first-post.md`` -> ``my first post``."""
    return PurePosixPath(file_path).stem.replace("-", " ").replace("_", " ")


def compute_url_path(file_path: str, homepage_file: str | None = None) -> str:
    """Output path, relative to the site root, for the markdown file at ``file_path``.

    A root-level ``index.md`` or ``README.md`` becomes ``index.html``. When the
    classifier's ``homepage_file`` is known, only that file is mapped there so
    two sources never compete for the homepage. Every other file keeps its
    folder and gets a slugified file name.
    """
    path = PurePosixPath(file_path)
    is_root_index = len(path.parts) == 1 and path.name.lower() in HOMEPAGE_SOURCE_NAMES
    if is_root_index and (homepage_file is None or homepage_file == file_path):
        return HOMEPAGE_URL

    file_name = f"{generate_slug(path.stem)}.html"
    if len(path.parts) == 1:
        return file_name
    return f"{path.parent.as_posix()}/{file_name}"


def reading_time(body: str) -> int:
    return max(1, count_words(body) // WORDS_PER_MINUTE)


def process(file_path: str, raw_text: str, *, homepage_file: str | None = None) -> Document:
    """Parse ``raw_text`` (the contents of ``file_path``) into a ``Document``.

    Raises:
        FrontmatterParsingError: If the front matter cannot be deserialized.

    """
    metadata, body = parse_frontmatter(raw_text, source=file_path)
    html_content = render_markdown(body)

    fallback_title = filename_title(file_path)
    title = extract_first_heading(html_content) or metadata.title or fallback_title

    url_path = compute_url_path(file_path, homepage_file)
    permalink = PathResolver.for_url(url_path).generate_permalink(url_path)

    h1 = extract_h1(html_content)
    display_title = h1 if h1 and h1 != fallback_title else title

    document = Document(
        source_path=file_path,
        title=title,
        raw_content=body,
        html_content=html_content,
        url_path=url_path,
        slug=generate_slug(title),
        permalink=permalink,
        display_title=display_title,
        excerpt=extract_excerpt(html_content),
        reading_time_minutes=reading_time(body),
        date=metadata.date,
        topics=tuple(dict.fromkeys(metadata.topics)),
        weight=metadata.weight,
        github_url=metadata.github,
        head_scripts=metadata.head_scripts,
    )
    logger.debug("Processed %s -> %s", file_path, url_path)
    return document
