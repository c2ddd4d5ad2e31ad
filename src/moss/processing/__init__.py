"""Markdown document processing."""

from moss.processing.dates import format_date, format_month
from moss.processing.frontmatter import FrontMatter, parse_frontmatter
from moss.processing.markdown import render_markdown, transform_markdown_link
from moss.processing.processor import compute_url_path, process
from moss.processing.slugs import generate_slug

__all__ = [
    "FrontMatter",
    "compute_url_path",
    "format_date",
    "format_month",
    "generate_slug",
    "parse_frontmatter",
    "process",
    "render_markdown",
    "transform_markdown_link",
]
