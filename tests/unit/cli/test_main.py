from typer.testing import CliRunner

from moss.cli import app
from moss.site import SITE_DIR

runner = CliRunner()


def test_compile_builds_site(blog_folder):
    result = runner.invoke(app, ["compile", str(blog_folder)])

    assert result.exit_code == 0, result.output
    assert "files scanned" in result.output
    assert (blog_folder / SITE_DIR / "index.html").exists()


def test_compile_reports_skipped_files(make_tree):
    root = make_tree({"index.md": "# Home", "bad.md": "---\ntitle: [oops\n---\n"})

    result = runner.invoke(app, ["compile", str(root)])

    assert result.exit_code == 0, result.output
    assert "skipped" in result.output
    assert "document_parse" in result.output


def test_compile_missing_folder(tmp_path):
    result = runner.invoke(app, ["compile", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Folder does not exist" in result.output
    assert "Traceback" not in result.output


def test_compile_empty_folder(tmp_path):
    result = runner.invoke(app, ["compile", str(tmp_path)])

    assert result.exit_code == 1
    assert "Nothing to build" in result.output


def test_scan_shows_structure(blog_folder):
    result = runner.invoke(app, ["scan", str(blog_folder)])

    assert result.exit_code == 0, result.output
    assert "HomepageWithCollections" in result.output
    assert "README.md" in result.output
    assert "journal" in result.output
    assert not (blog_folder / SITE_DIR).exists()
