"""Filesystem walk that feeds the structure classifier.

One unreadable entry never aborts a scan: it is logged, recorded as a
``partial_scan`` warning and skipped.
"""

from __future__ import annotations

import logging
import os
import stat
from datetime import UTC, datetime
from pathlib import Path

from moss.data_primitives import BuildWarning, FileRecord, ProjectStructure, WarningKind
from moss.exceptions import SourceNotADirectoryError, SourceNotFoundError
from moss.scanning.classifier import classify

logger = logging.getLogger(__name__)

# Generated output lives under the source folder; never scan it back in.
OUTPUT_DIR_NAME = ".moss"


def _read_metadata(path: Path) -> os.stat_result:
    return path.stat()


def _partial_scan_warning(relative_path: str, exc: OSError) -> BuildWarning:
    reason = exc.strerror or str(exc)
    logger.warning("Skipping unreadable entry %s: %s", relative_path, reason)
    return BuildWarning(WarningKind.PARTIAL_SCAN, relative_path, reason)


def _relative(root: Path, path: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def walk_files(root: Path) -> tuple[list[FileRecord], list[BuildWarning]]:
    """Recursively collect a ``FileRecord`` for every regular file under ``root``."""
    records: list[FileRecord] = []
    warnings: list[BuildWarning] = []

    def on_error(exc: OSError) -> None:
        failed = Path(exc.filename) if exc.filename else root
        warnings.append(_partial_scan_warning(_relative(root, failed), exc))

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames[:] = sorted(d for d in dirnames if d != OUTPUT_DIR_NAME)
        current = Path(dirpath)
        for name in sorted(filenames):
            path = current / name
            relative_path = _relative(root, path)
            try:
                metadata = _read_metadata(path)
            except OSError as exc:
                warnings.append(_partial_scan_warning(relative_path, exc))
                continue

            if not stat.S_ISREG(metadata.st_mode):
                continue

            records.append(
                FileRecord(
                    relative_path=relative_path,
                    extension=path.suffix[1:].lower(),
                    size_bytes=metadata.st_size,
                    modified=datetime.fromtimestamp(metadata.st_mtime, tz=UTC),
                )
            )

    return records, warnings


def scan(root_path: str | Path) -> ProjectStructure:
    """Scan ``root_path`` and classify what was found.

    Raises:
        SourceNotFoundError: If the path does not exist.
        SourceNotADirectoryError: If the path is not a folder.

    """
    root = Path(root_path).expanduser()
    if not root.exists():
        raise SourceNotFoundError(str(root_path))
    if not root.is_dir():
        raise SourceNotADirectoryError(str(root_path))

    records, warnings = walk_files(root)
    logger.info("Scanned %d files in %s", len(records), root)
    return classify(str(root), records, warnings)
