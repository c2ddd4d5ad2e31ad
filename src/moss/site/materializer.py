"""Write the generated site to ``{source}/.moss/site``.

This module owns the output tree:
- Cleaning and recreating the output directory
- Processing every markdown file into a ``Document``
- Rendering document, topic, collection and index pages
- Copying the bundled stylesheet/script and the user's assets

Per-file problems become ``BuildWarning`` records; only failures that would
leave the site unusable (output directory, stylesheet, index page) raise.
"""

from __future__ import annotations

import html
import logging
import shutil
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

from moss.data_primitives import HOMEPAGE_URL, BuildWarning, SiteResult, WarningKind
from moss.exceptions import DocumentParsingError, OutputWriteError
from moss.processing import process
from moss.rendering.navigation import NavigationBuilder, topic_url
from moss.rendering.pages import (
    article_meta,
    collection_breadcrumb,
    collection_members,
    entry_list,
    group_by_topic,
    homepage_content,
    listing_content,
    topics_section,
)
from moss.rendering.paths import CSS_FILE, FAVICON_FILE, JS_FILE, PathResolver
from moss.rendering.templates import (
    ArticleView,
    CollectionView,
    PageVariant,
    PageView,
    TemplateKind,
    TopicView,
    render_view,
    select_template,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from moss.config import MossConfig
    from moss.data_primitives import Document, ProjectStructure

logger = logging.getLogger(__name__)

SITE_DIR = Path(".moss") / "site"
DEFAULT_SITE_TITLE = "Untitled Site"


def resolve_site_title(
    documents: Sequence[Document],
    homepage: Document | None,
    config: MossConfig | None = None,
) -> str:
    """Configured site name, else homepage title, else first document title."""
    if config is not None and config.site.site_name:
        return config.site.site_name
    if homepage is not None:
        return homepage.title
    if documents:
        return documents[0].title
    return DEFAULT_SITE_TITLE


class SiteMaterializer:
    """Generates one site from a scanned ``ProjectStructure``."""

    def __init__(self, source_root: Path, structure: ProjectStructure, config: MossConfig | None = None) -> None:
        self.source_root = Path(source_root)
        self.structure = structure
        self.config = config
        self.output_dir = self.source_root / SITE_DIR
        self.warnings: list[BuildWarning] = list(structure.warnings)
        self.written: set[str] = set()

        self.documents: list[Document] = []
        self.homepage: Document | None = None
        self.site_title = DEFAULT_SITE_TITLE
        self.has_favicon = any(record.relative_path == FAVICON_FILE for record in structure.image_files)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def _warn(self, kind: WarningKind, path: str, message: str) -> None:
        logger.warning("Skipping %s: %s", path, message)
        self.warnings.append(BuildWarning(kind=kind, path=path, message=message))

    @property
    def content_folders(self) -> frozenset[str]:
        return self.structure.content_folders

    @property
    def _github_url(self) -> str | None:
        return self.homepage.github_url if self.homepage else None

    @property
    def _site_head_scripts(self) -> str:
        return (self.homepage.head_scripts if self.homepage else None) or ""

    def _navigation(self, resolver: PathResolver, current_url: str | None) -> NavigationBuilder:
        return NavigationBuilder(
            self.documents,
            self.site_title,
            resolver,
            content_folders=self.content_folders,
            current_url=current_url,
            github_url=self._github_url,
        )

    def _chrome(self) -> dict[str, object]:
        site = self.config.site if self.config is not None else None
        return {
            "has_favicon": self.has_favicon,
            "description": (site.description if site else None) or "",
            "author": (site.author if site else None) or "",
        }

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def prepare_output(self) -> None:
        try:
            if self.output_dir.exists():
                shutil.rmtree(self.output_dir)
            self.output_dir.mkdir(parents=True)
        except OSError as exc:
            raise OutputWriteError(str(self.output_dir), str(exc)) from exc

    def load_documents(self) -> None:
        seen: set[str] = set()
        for record in self.structure.markdown_files:
            source = self.source_root / record.relative_path
            try:
                raw_text = source.read_text(encoding="utf-8")
                document = process(record.relative_path, raw_text, homepage_file=self.structure.homepage_file)
            except (OSError, UnicodeDecodeError) as exc:
                self._warn(WarningKind.DOCUMENT_PARSE, record.relative_path, f"Could not read file: {exc}")
                continue
            except DocumentParsingError as exc:
                self._warn(WarningKind.DOCUMENT_PARSE, record.relative_path, str(exc))
                continue

            if document.url_path in seen:
                self._warn(
                    WarningKind.DOCUMENT_PARSE,
                    record.relative_path,
                    f"Output path {document.url_path} is already used by another document",
                )
                continue
            seen.add(document.url_path)
            self.documents.append(document)

        self.homepage = next((doc for doc in self.documents if doc.is_homepage), None)
        self.site_title = resolve_site_title(self.documents, self.homepage, self.config)
        logger.info("Processed %d of %d markdown files", len(self.documents), len(self.structure.markdown_files))

    def _write(self, url_path: str, content: str | bytes) -> None:
        target = self.output_dir / url_path
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")

    def _write_page(self, url_path: str, view: PageVariant, source: str) -> None:
        try:
            self._write(url_path, render_view(view))
        except OSError as exc:
            self._warn(WarningKind.DOCUMENT_PARSE, source, f"Could not write {url_path}: {exc}")
            return
        self.written.add(url_path)

    def _document_view(self, document: Document) -> PageVariant:
        resolver = PathResolver.for_url(document.url_path)
        nav = self._navigation(resolver, document.url_path)
        common = {
            "title": document.display_title,
            "resolver": resolver,
            "navigation": nav.main_navigation(),
            "content": document.html_content,
            "head_scripts": document.head_scripts or "",
            **self._chrome(),
        }
        kind = select_template(document, document.is_homepage, self.content_folders)
        if kind is TemplateKind.ARTICLE:
            return ArticleView(**common, breadcrumb=nav.breadcrumb(document), article_meta=article_meta(document))
        return PageView(**common, latest_list=nav.latest_sidebar())

    def write_documents(self) -> None:
        for document in self.documents:
            if document.is_homepage:
                continue
            self._write_page(document.url_path, self._document_view(document), document.source_path)

    def write_topic_pages(self) -> None:
        taken = {doc.url_path for doc in self.documents}
        for topic, members in group_by_topic(self.documents).items():
            url_path = topic_url(topic)
            if url_path in taken or url_path in self.written:
                continue
            resolver = PathResolver.for_url(url_path)
            view = TopicView(
                title=f"{topic} - {self.site_title}",
                resolver=resolver,
                navigation=self._navigation(resolver, url_path).main_navigation(),
                content="",
                head_scripts=self._site_head_scripts,
                topic=topic,
                article_list=entry_list(members, resolver),
                **self._chrome(),
            )
            self._write_page(url_path, view, url_path)

    def write_collection_indexes(self) -> None:
        taken = {doc.url_path for doc in self.documents}
        for folder in sorted(self.content_folders):
            members = collection_members(self.documents, folder)
            url_path = f"{folder}/{HOMEPAGE_URL}"
            if not members or url_path in taken:
                continue
            resolver = PathResolver.for_url(url_path)
            view = CollectionView(
                title=f"{folder} - {self.site_title}",
                resolver=resolver,
                navigation=self._navigation(resolver, url_path).main_navigation(),
                content=f"<h1>{html.escape(folder)}</h1>",
                head_scripts=self._site_head_scripts,
                collection=folder,
                breadcrumb=collection_breadcrumb(folder),
                article_list=entry_list(members, resolver),
                **self._chrome(),
            )
            self._write_page(url_path, view, url_path)

    def write_static_assets(self) -> None:
        static = files("moss.static")
        try:
            self._write(CSS_FILE, static.joinpath(CSS_FILE).read_bytes())
        except OSError as exc:
            raise OutputWriteError(str(self.output_dir / CSS_FILE), str(exc)) from exc
        try:
            self._write(JS_FILE, static.joinpath(JS_FILE).read_bytes())
        except OSError as exc:
            self._warn(WarningKind.ASSET_COPY, JS_FILE, str(exc))

    def copy_assets(self) -> None:
        for record in (*self.structure.image_files, *self.structure.other_files):
            target = self.output_dir / record.relative_path
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(self.source_root / record.relative_path, target)
            except OSError as exc:
                self._warn(WarningKind.ASSET_COPY, record.relative_path, f"Could not copy file: {exc}")

    def write_index(self) -> None:
        resolver = PathResolver()
        nav = self._navigation(resolver, HOMEPAGE_URL)
        if self.homepage is not None:
            content = homepage_content(self.homepage, self.documents, self.content_folders, resolver)
        else:
            content = listing_content(self.documents, resolver)
        view = PageView(
            title=self.site_title,
            resolver=resolver,
            navigation=nav.main_navigation(),
            content=content,
            head_scripts=self._site_head_scripts,
            latest_list=nav.latest_sidebar(),
            topics_section=topics_section(nav.topics_inline()),
            **self._chrome(),
        )
        try:
            self._write(HOMEPAGE_URL, render_view(view))
        except OSError as exc:
            raise OutputWriteError(str(self.output_dir / HOMEPAGE_URL), str(exc)) from exc
        self.written.add(HOMEPAGE_URL)

    def run(self) -> SiteResult:
        self.prepare_output()
        self.load_documents()
        self.write_documents()
        self.write_topic_pages()
        self.write_collection_indexes()
        self.write_static_assets()
        self.copy_assets()
        self.write_index()

        logger.info("Generated %d pages in %s", len(self.written), self.output_dir)
        return SiteResult(
            page_count=len(self.written),
            output_path=str(self.output_dir),
            site_title=self.site_title,
            warnings=tuple(self.warnings),
        )


def generate(source_root: Path, structure: ProjectStructure, *, config: MossConfig | None = None) -> SiteResult:
    """Generate the static site for ``structure`` under ``source_root/.moss/site``.

    Raises:
        OutputWriteError: If the output directory, stylesheet or index page
            cannot be written.

    """
    return SiteMaterializer(source_root, structure, config).run()
