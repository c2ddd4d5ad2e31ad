"""Immutable records passed between pipeline stages."""

from moss.data_primitives.document import HOMEPAGE_URL, Document
from moss.data_primitives.files import (
    DOCUMENT_EXTENSIONS,
    FileKind,
    FileRecord,
    ProjectStructure,
    ProjectType,
)
from moss.data_primitives.results import BuildWarning, SiteResult, WarningKind

__all__ = [
    "DOCUMENT_EXTENSIONS",
    "HOMEPAGE_URL",
    "BuildWarning",
    "Document",
    "FileKind",
    "FileRecord",
    "ProjectStructure",
    "ProjectType",
    "SiteResult",
    "WarningKind",
]
