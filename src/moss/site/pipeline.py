"""Entry points that run the whole scan → generate pipeline for a folder."""

from __future__ import annotations

import logging
from pathlib import Path

from moss.config import MossConfig
from moss.data_primitives import ProjectStructure, SiteResult
from moss.exceptions import NoContentError
from moss.scanning import scan
from moss.site.materializer import generate

logger = logging.getLogger(__name__)


def build(source_folder_path: str | Path) -> tuple[ProjectStructure, SiteResult]:
    """Scan, then generate; returns both so callers can report on either."""
    structure = scan(source_folder_path)
    if structure.total_file_count == 0:
        raise NoContentError(str(source_folder_path))

    root = Path(structure.root_path)
    config = MossConfig.load(root)
    logger.info("Detected %s: %s", structure.project_type.value, structure.project_type.strategy)
    return structure, generate(root, structure, config=config)


def generate_site(source_folder_path: str | Path) -> SiteResult:
    """Scan ``source_folder_path`` and write its site to ``.moss/site``.

    Raises:
        InputError: If the folder is missing, not a directory, or its
            config file is invalid.
        NoContentError: If the folder contains no files.
        OutputWriteError: If the output tree cannot be written.

    """
    _, result = build(source_folder_path)
    return result


def summarize(structure: ProjectStructure, result: SiteResult) -> str:
    root_name = Path(structure.root_path).name or "unnamed-site"
    homepage = f" (Homepage: {structure.homepage_file})" if structure.homepage_file else ""
    folders = ", ".join(sorted(structure.content_folders)) or "none"
    return (
        f"'{root_name}': {structure.total_file_count} files scanned. "
        f"{structure.project_type.strategy}{homepage}. Content folders: {folders}. "
        f"{result.page_count} pages generated at {result.output_path}"
    )


def compile_folder(source_folder_path: str | Path) -> str:
    """Generate the site and describe what was built in one line."""
    return summarize(*build(source_folder_path))
