"""Outcome records: per-unit warnings and the final site summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class WarningKind(str, Enum):
    """Kinds of non-fatal problems recorded during a run."""

    PARTIAL_SCAN = "partial_scan"
    DOCUMENT_PARSE = "document_parse"
    ASSET_COPY = "asset_copy"


@dataclass(frozen=True, slots=True)
class BuildWarning:
    """A single unit of content that was skipped.

    The build still succeeds; these are surfaced so callers can report what
    is missing from the generated site.
    """

    kind: WarningKind
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True, slots=True)
class SiteResult:
    """Summary returned by a successful generation run."""

    page_count: int
    output_path: str
    site_title: str
    warnings: tuple[BuildWarning, ...] = field(default_factory=tuple)
