"""Page template selection and rendering.

Templates only substitute named placeholders. All structural decisions
(which fragments exist, what goes in them) are made in Python before
rendering, and expressed through one view type per template variant.
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from jinja2 import Environment, FileSystemLoader

if TYPE_CHECKING:
    from moss.data_primitives import Document
    from moss.rendering.paths import PathResolver


class TemplateKind(str, Enum):
    """Page template variants."""

    PAGE = "page"
    ARTICLE = "article"
    TOPIC = "topic"
    COLLECTION = "collection"

    @property
    def template_name(self) -> str:
        return f"{self.value}.html.jinja"


def select_template(
    document: Document | None,
    is_homepage: bool,
    content_folders: Iterable[str],
) -> TemplateKind:
    """Choose the template for a document page.

    Listing contexts (no document) and the homepage use the general page
    template; anything inside a content folder is an article. Topic and
    collection pages never come through here, their callers pick them.
    """
    if document is None or is_homepage:
        return TemplateKind.PAGE
    if any(document.url_path.startswith(f"{folder}/") for folder in content_folders):
        return TemplateKind.ARTICLE
    return TemplateKind.PAGE


@dataclass(frozen=True, kw_only=True)
class PageChrome:
    """Fields every template variant needs."""

    kind: ClassVar[TemplateKind]

    title: str
    resolver: PathResolver
    navigation: str
    content: str
    head_scripts: str = ""
    has_favicon: bool = False
    description: str = ""
    author: str = ""

    def _meta_tags(self) -> str:
        tags = []
        if self.description:
            tags.append(f'<meta name="description" content="{html.escape(self.description)}">')
        if self.author:
            tags.append(f'<meta name="author" content="{html.escape(self.author)}">')
        return "\n    ".join(tags)

    def _favicon_link(self) -> str:
        if not self.has_favicon:
            return ""
        return f'<link rel="icon" type="image/svg+xml" href="{self.resolver.favicon_path()}">'

    def variables(self) -> dict[str, str]:
        return {
            "title": html.escape(self.title),
            "css_path": self.resolver.css_path(),
            "js_path": self.resolver.js_path(),
            "favicon": self._favicon_link(),
            "meta": self._meta_tags(),
            "head_scripts": self.head_scripts,
            "navigation": self.navigation,
            "content": self.content,
        }


@dataclass(frozen=True, kw_only=True)
class PageView(PageChrome):
    """General page: optional latest-entry sidebar and topic list."""

    kind: ClassVar[TemplateKind] = TemplateKind.PAGE

    latest_list: str = ""
    topics_section: str = ""

    def variables(self) -> dict[str, str]:
        return {**super().variables(), "latest_list": self.latest_list, "topics_section": self.topics_section}


@dataclass(frozen=True, kw_only=True)
class ArticleView(PageChrome):
    """A collection entry, always shown with a breadcrumb back to its collection."""

    kind: ClassVar[TemplateKind] = TemplateKind.ARTICLE

    breadcrumb: str
    article_meta: str = ""

    def variables(self) -> dict[str, str]:
        return {**super().variables(), "breadcrumb": self.breadcrumb, "article_meta": self.article_meta}


@dataclass(frozen=True, kw_only=True)
class TopicView(PageChrome):
    """Every document tagged with one topic."""

    kind: ClassVar[TemplateKind] = TemplateKind.TOPIC

    topic: str
    article_list: str

    def variables(self) -> dict[str, str]:
        return {**super().variables(), "topic": html.escape(self.topic), "article_list": self.article_list}


@dataclass(frozen=True, kw_only=True)
class CollectionView(PageChrome):
    """Index of one content folder."""

    kind: ClassVar[TemplateKind] = TemplateKind.COLLECTION

    collection: str
    breadcrumb: str
    article_list: str

    def variables(self) -> dict[str, str]:
        return {
            **super().variables(),
            "collection": html.escape(self.collection),
            "breadcrumb": self.breadcrumb,
            "article_list": self.article_list,
        }


PageVariant = PageView | ArticleView | TopicView | CollectionView


class TemplateRenderer:
    """Loads the bundled page templates and fills in their placeholders."""

    def __init__(self, template_dir: Path | None = None) -> None:
        if template_dir is None:
            template_dir = Path(str(files("moss.rendering").joinpath("templates")))
        self.template_dir = template_dir
        # Values are pre-built HTML fragments, escaped where they are assembled.
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, kind: TemplateKind, variables: Mapping[str, str | None]) -> str:
        """Render the ``kind`` template; missing or None values become empty strings."""
        template = self.env.get_template(kind.template_name)
        return template.render(**{name: value or "" for name, value in variables.items()})

    def render_view(self, view: PageVariant) -> str:
        return self.render(view.kind, view.variables())


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    return TemplateRenderer()


def render(kind: TemplateKind, variables: Mapping[str, str | None]) -> str:
    return default_renderer().render(kind, variables)


def render_view(view: PageVariant) -> str:
    return default_renderer().render_view(view)
