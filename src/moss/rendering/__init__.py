"""Path resolution, navigation and page templates."""

from moss.rendering.navigation import NavigationBuilder
from moss.rendering.paths import PathResolver
from moss.rendering.templates import (
    ArticleView,
    CollectionView,
    PageView,
    TemplateKind,
    TemplateRenderer,
    TopicView,
    render,
    render_view,
    select_template,
)

__all__ = [
    "ArticleView",
    "CollectionView",
    "NavigationBuilder",
    "PageView",
    "PathResolver",
    "TemplateKind",
    "TemplateRenderer",
    "TopicView",
    "render",
    "render_view",
    "select_template",
]
