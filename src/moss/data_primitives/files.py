"""Scanned-file records and the project structure built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from itertools import chain
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from moss.data_primitives.results import BuildWarning

MARKDOWN_EXTENSIONS = frozenset({"md", "markdown", "mdown", "mkd"})
HTML_EXTENSIONS = frozenset({"html", "htm"})
IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "svg", "webp"})
# Extensions that count as "documents" for homepage and collection detection.
# Pages and Word files are tracked but only ever copied as opaque assets.
DOCUMENT_EXTENSIONS = frozenset({"md", "markdown", "pages", "docx", "doc"})


class FileKind(str, Enum):
    """Bucket a scanned file falls into, decided by its extension."""

    MARKDOWN = "markdown"
    HTML = "html"
    IMAGE = "image"
    OTHER = "other"

    @classmethod
    def from_extension(cls, extension: str) -> FileKind:
        ext = extension.lower()
        if ext in MARKDOWN_EXTENSIONS:
            return cls.MARKDOWN
        if ext in HTML_EXTENSIONS:
            return cls.HTML
        if ext in IMAGE_EXTENSIONS:
            return cls.IMAGE
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A regular file found under the scanned root.

    ``relative_path`` always uses ``/`` separators regardless of platform.
    """

    relative_path: str
    extension: str
    size_bytes: int
    modified: datetime | None = None

    @property
    def kind(self) -> FileKind:
        return FileKind.from_extension(self.extension)

    @property
    def is_document(self) -> bool:
        return self.extension.lower() in DOCUMENT_EXTENSIONS

    @property
    def is_root_level(self) -> bool:
        return "/" not in self.relative_path

    @property
    def top_level_folder(self) -> str | None:
        if self.is_root_level:
            return None
        return self.relative_path.split("/", 1)[0]


class ProjectType(str, Enum):
    """Overall site shape inferred from the folder layout."""

    HOMEPAGE_WITH_COLLECTIONS = "HomepageWithCollections"
    SIMPLE_FLAT_SITE = "SimpleFlatSite"
    BLOG_STYLE_FLAT_SITE = "BlogStyleFlatSite"

    @property
    def strategy(self) -> str:
        """Human-readable description of how the site will be organized."""
        return _STRATEGIES[self]


_STRATEGIES = {
    ProjectType.HOMEPAGE_WITH_COLLECTIONS: "Homepage with organized content collections detected",
    ProjectType.SIMPLE_FLAT_SITE: "Simple site with all pages in navigation menu",
    ProjectType.BLOG_STYLE_FLAT_SITE: "Blog-style site with essential pages in menu, others listed on homepage",
}


@dataclass(frozen=True, slots=True)
class ProjectStructure:
    """Everything downstream stages need to know about the scanned folder.

    Built once per generation run and treated as read-only input.
    """

    root_path: str
    markdown_files: tuple[FileRecord, ...]
    html_files: tuple[FileRecord, ...]
    image_files: tuple[FileRecord, ...]
    other_files: tuple[FileRecord, ...]
    homepage_file: str | None
    content_folders: frozenset[str]
    project_type: ProjectType
    warnings: tuple[BuildWarning, ...] = field(default_factory=tuple)

    @property
    def total_file_count(self) -> int:
        return len(self.markdown_files) + len(self.html_files) + len(self.image_files) + len(self.other_files)

    def all_files(self) -> Iterator[FileRecord]:
        return chain(self.markdown_files, self.html_files, self.image_files, self.other_files)
