from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path, PurePosixPath

import pytest

from moss.data_primitives import Document
from moss.processing.slugs import generate_slug
from moss.rendering.paths import PathResolver

TreeSpec = Mapping[str, str | bytes]


@pytest.fixture(autouse=True)
def _clean_moss_env(monkeypatch):
    """Keep developer MOSS_* variables from leaking into config tests."""
    for name in list(os.environ):
        if name.startswith("MOSS_"):
            monkeypatch.delenv(name, raising=False)


def write_tree(root: Path, files: TreeSpec) -> Path:
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a source folder from a ``{relative_path: content}`` mapping."""

    def _make(files: TreeSpec, name: str = "site") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        return write_tree(root, files)

    return _make


@pytest.fixture
def blog_folder(make_tree) -> Path:
    return make_tree(
        {
            "README.md": "# My Blog\n\nWelcome to my blog.\n",
            "journal/2025-01-15.md": "# First Post\n\nThe newest entry.\n",
            "journal/2025-01-10.md": "# Earlier\n\nAn older entry.\n",
        },
        name="blog",
    )


def build_document(
    url_path: str,
    *,
    title: str | None = None,
    html_content: str | None = None,
    date: str | None = None,
    topics: tuple[str, ...] = (),
    weight: int | None = None,
    github_url: str | None = None,
    head_scripts: str | None = None,
    reading_time_minutes: int = 1,
) -> Document:
    title = title or PurePosixPath(url_path).stem
    if html_content is None:
        html_content = f"<h1>{title}</h1>\n<p>Body of {title}</p>\n"
    return Document(
        source_path=url_path.removesuffix(".html") + ".md",
        title=title,
        raw_content=f"# {title}\n\nBody of {title}\n",
        html_content=html_content,
        url_path=url_path,
        slug=generate_slug(title),
        permalink=PathResolver.for_url(url_path).generate_permalink(url_path),
        display_title=title,
        excerpt=f"Body of {title}",
        reading_time_minutes=reading_time_minutes,
        date=date,
        topics=topics,
        weight=weight,
        github_url=github_url,
        head_scripts=head_scripts,
    )


@pytest.fixture
def make_document() -> Callable[..., Document]:
    return build_document
