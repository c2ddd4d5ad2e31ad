"""Structural classification of a scanned folder.

Everything here is a pure function of the file list: no filesystem access,
so it can be exercised with hand-built ``FileRecord`` lists.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from moss.data_primitives import FileKind, FileRecord, ProjectStructure, ProjectType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from moss.data_primitives import BuildWarning

logger = logging.getLogger(__name__)

# Root-level names checked in order before falling back to the
# alphabetically-first document.
HOMEPAGE_PRIORITY = ("index.md", "index.pages", "index.docx", "readme.md")
FLAT_SITE_THRESHOLD = 5


def detect_homepage(files: Iterable[FileRecord]) -> str | None:
    """Return the relative path of the most likely homepage file.

    Only root-level files are considered. Names are matched case-insensitively
    in ``HOMEPAGE_PRIORITY`` order; when none match, the alphabetically-first
    root document wins. Returns None when the root holds no documents.
    """
    root_files = [f for f in files if f.is_root_level]
    by_name = {}
    for record in root_files:
        by_name.setdefault(record.relative_path.lower(), record.relative_path)

    for candidate in HOMEPAGE_PRIORITY:
        if candidate in by_name:
            return by_name[candidate]

    documents = sorted(f.relative_path for f in root_files if f.is_document)
    return documents[0] if documents else None


def detect_content_folders(files: Iterable[FileRecord]) -> frozenset[str]:
    """Return the top-level folders that contain at least one document file."""
    return frozenset(
        f.top_level_folder for f in files if f.is_document and f.top_level_folder is not None
    )


def detect_project_type(files: Iterable[FileRecord], content_folders: Iterable[str]) -> ProjectType:
    """Pick the site shape from the distribution of document files."""
    if any(True for _ in content_folders):
        return ProjectType.HOMEPAGE_WITH_COLLECTIONS

    root_doc_count = sum(1 for f in files if f.is_root_level and f.is_document)
    if root_doc_count <= FLAT_SITE_THRESHOLD:
        return ProjectType.SIMPLE_FLAT_SITE
    return ProjectType.BLOG_STYLE_FLAT_SITE


def classify(
    root_path: str,
    files: Sequence[FileRecord],
    warnings: Sequence[BuildWarning] = (),
) -> ProjectStructure:
    """Bucket ``files`` by kind and infer the project's structure."""
    buckets: dict[FileKind, list[FileRecord]] = {kind: [] for kind in FileKind}
    for record in files:
        buckets[record.kind].append(record)

    homepage = detect_homepage(files)
    content_folders = detect_content_folders(files)
    project_type = detect_project_type(files, content_folders)
    logger.debug(
        "Classified %s as %s (homepage=%s, collections=%s)",
        root_path,
        project_type.value,
        homepage,
        sorted(content_folders),
    )

    return ProjectStructure(
        root_path=root_path,
        markdown_files=tuple(buckets[FileKind.MARKDOWN]),
        html_files=tuple(buckets[FileKind.HTML]),
        image_files=tuple(buckets[FileKind.IMAGE]),
        other_files=tuple(buckets[FileKind.OTHER]),
        homepage_file=homepage,
        content_folders=content_folders,
        project_type=project_type,
        warnings=tuple(warnings),
    )
