import errno
import os

import pytest

from moss.data_primitives import ProjectType, WarningKind
from moss.exceptions import InputError, SourceNotADirectoryError, SourceNotFoundError
from moss.scanning import scan, scanner, walk_files


def test_walk_files_collects_every_regular_file(make_tree):
    root = make_tree(
        {
            "index.md": "# Home",
            "posts/2025/entry.md": "# Entry",
            "images/Photo.PNG": b"\x89PNG",
        }
    )

    records, warnings = walk_files(root)

    assert warnings == []
    assert [r.relative_path for r in records] == ["index.md", "images/Photo.PNG", "posts/2025/entry.md"]
    photo = records[1]
    assert photo.extension == "png"
    assert photo.size_bytes == 4
    assert photo.modified is not None


def test_walk_files_skips_generated_output(make_tree):
    root = make_tree({"index.md": "# Home", ".moss/site/index.html": "<html></html>"})

    records, _ = walk_files(root)

    assert [r.relative_path for r in records] == ["index.md"]


def test_scan_classifies_folder(blog_folder):
    structure = scan(blog_folder)

    assert structure.root_path == str(blog_folder)
    assert structure.homepage_file == "README.md"
    assert structure.content_folders == frozenset({"journal"})
    assert structure.project_type is ProjectType.HOMEPAGE_WITH_COLLECTIONS
    assert structure.total_file_count == 3


def test_scan_empty_folder(tmp_path):
    structure = scan(tmp_path)

    assert structure.total_file_count == 0
    assert structure.homepage_file is None
    assert structure.warnings == ()


def test_scan_missing_folder(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(SourceNotFoundError) as excinfo:
        scan(missing)

    assert isinstance(excinfo.value, InputError)
    assert "Folder does not exist" in str(excinfo.value)


def test_scan_file_instead_of_folder(tmp_path):
    path = tmp_path / "file.md"
    path.write_text("# Hi", encoding="utf-8")

    with pytest.raises(SourceNotADirectoryError, match="not a directory"):
        scan(path)


def test_unreadable_file_is_recorded_and_skipped(make_tree, monkeypatch):
    root = make_tree({"index.md": "# Home", "secret.md": "# Secret", "posts/a.md": "# A"})
    real_read_metadata = scanner._read_metadata

    def flaky(path):
        if path.name == "secret.md":
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_read_metadata(path)

    monkeypatch.setattr(scanner, "_read_metadata", flaky)

    structure = scan(root)

    assert [r.relative_path for r in structure.markdown_files] == ["index.md", "posts/a.md"]
    assert len(structure.warnings) == 1
    warning = structure.warnings[0]
    assert warning.kind is WarningKind.PARTIAL_SCAN
    assert warning.path == "secret.md"
    assert warning.message == "Permission denied"


def test_broken_symlink_is_recorded_and_skipped(make_tree):
    root = make_tree({"index.md": "# Home"})
    os.symlink(root / "missing.md", root / "dangling.md")

    structure = scan(root)

    assert [r.relative_path for r in structure.all_files()] == ["index.md"]
    assert [w.path for w in structure.warnings] == ["dangling.md"]
    assert structure.warnings[0].kind is WarningKind.PARTIAL_SCAN
