from pathlib import PurePosixPath

import pytest

from moss.data_primitives import BuildWarning, FileRecord, ProjectType, WarningKind
from moss.scanning import classify, detect_content_folders, detect_homepage, detect_project_type


def record(path: str, size: int = 10) -> FileRecord:
    return FileRecord(relative_path=path, extension=PurePosixPath(path).suffix[1:].lower(), size_bytes=size)


def records(*paths: str) -> list[FileRecord]:
    return [record(p) for p in paths]


@pytest.mark.parametrize(
    ("paths", "expected"),
    [
        (("index.md", "README.md"), "index.md"),
        (("about.md", "README.md"), "README.md"),
        (("b.md", "a.md"), "a.md"),
        (("README.md", "index.pages"), "index.pages"),
        (("index.docx", "README.md"), "index.docx"),
        (("INDEX.MD", "readme.md"), "INDEX.MD"),
        (("Readme.md", "zeta.md"), "Readme.md"),
    ],
)
def test_detect_homepage_priority(paths, expected):
    assert detect_homepage(records(*paths)) == expected


def test_detect_homepage_ignores_nested_files():
    assert detect_homepage(records("posts/index.md", "posts/README.md")) is None


def test_detect_homepage_ignores_non_documents_in_fallback():
    assert detect_homepage(records("a.png", "b.txt", "c.md")) == "c.md"
    assert detect_homepage(records("a.png", "notes.txt")) is None


def test_detect_content_folders_requires_a_document():
    files = records(
        "index.md",
        "posts/x.md",
        "posts/y.md",
        "projects/a.docx",
        "images/p.jpg",
    )

    assert detect_content_folders(files) == frozenset({"posts", "projects"})


def test_detect_content_folders_uses_top_level_segment():
    files = records("guides/python/intro.md", "assets/css/site.css")

    assert detect_content_folders(files) == frozenset({"guides"})


def test_content_folders_make_homepage_with_collections():
    files = records("index.md", "posts/one.md")

    assert detect_project_type(files, {"posts"}) is ProjectType.HOMEPAGE_WITH_COLLECTIONS


@pytest.mark.parametrize(
    ("root_docs", "expected"),
    [
        (1, ProjectType.SIMPLE_FLAT_SITE),
        (5, ProjectType.SIMPLE_FLAT_SITE),
        (6, ProjectType.BLOG_STYLE_FLAT_SITE),
        (7, ProjectType.BLOG_STYLE_FLAT_SITE),
    ],
)
def test_flat_site_threshold(root_docs, expected):
    files = records(*(f"page-{i}.md" for i in range(root_docs)), "photo.png")

    assert detect_project_type(files, frozenset()) is expected


def test_classify_buckets_files_by_kind():
    files = records(
        "index.md",
        "notes.markdown",
        "legacy.html",
        "posts/one.md",
        "images/cat.png",
        "images/dog.JPG",
        "report.docx",
        "data.csv",
    )

    structure = classify("/site", files)

    assert [r.relative_path for r in structure.markdown_files] == ["index.md", "notes.markdown", "posts/one.md"]
    assert [r.relative_path for r in structure.html_files] == ["legacy.html"]
    assert [r.relative_path for r in structure.image_files] == ["images/cat.png", "images/dog.JPG"]
    assert [r.relative_path for r in structure.other_files] == ["report.docx", "data.csv"]
    assert structure.total_file_count == len(files)
    assert sorted(r.relative_path for r in structure.all_files()) == sorted(f.relative_path for f in files)
    assert structure.homepage_file == "index.md"
    assert structure.content_folders == frozenset({"posts"})
    assert structure.project_type is ProjectType.HOMEPAGE_WITH_COLLECTIONS


def test_classify_keeps_scan_warnings():
    warning = BuildWarning(WarningKind.PARTIAL_SCAN, "secret.md", "Permission denied")

    structure = classify("/site", records("index.md"), [warning])

    assert structure.warnings == (warning,)


def test_classify_empty_folder():
    structure = classify("/site", [])

    assert structure.total_file_count == 0
    assert structure.homepage_file is None
    assert structure.content_folders == frozenset()
    assert structure.project_type is ProjectType.SIMPLE_FLAT_SITE


def test_project_type_has_strategy_message():
    assert "collections" in ProjectType.HOMEPAGE_WITH_COLLECTIONS.strategy
    assert ProjectType.SIMPLE_FLAT_SITE.strategy != ProjectType.BLOG_STYLE_FLAT_SITE.strategy
