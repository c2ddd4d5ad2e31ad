"""Folder scanning and structure classification."""

from moss.scanning.classifier import (
    classify,
    detect_content_folders,
    detect_homepage,
    detect_project_type,
)
from moss.scanning.scanner import scan, walk_files

__all__ = [
    "classify",
    "detect_content_folders",
    "detect_homepage",
    "detect_project_type",
    "scan",
    "walk_files",
]
