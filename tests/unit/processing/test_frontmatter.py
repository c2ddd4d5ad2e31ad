import pytest

from moss.exceptions import DocumentParsingError, FrontmatterParsingError
from moss.processing import FrontMatter, parse_frontmatter


def test_parse_frontmatter_basic():
    content = "---\ntitle: Hello\ndate: 2025-01-15\ntopics: [python, web]\nweight: 2\n---\nBody text\n"

    metadata, body = parse_frontmatter(content)

    assert metadata.title == "Hello"
    assert metadata.date == "2025-01-15"
    assert metadata.topics == ["python", "web"]
    assert metadata.weight == 2
    assert body.strip() == "Body text"


def test_parse_frontmatter_without_block():
    metadata, body = parse_frontmatter("# Just content\n")

    assert metadata == FrontMatter()
    assert body.strip() == "# Just content"


def test_single_topic_becomes_list():
    metadata, _ = parse_frontmatter("---\ntopics: python\n---\nBody")

    assert metadata.topics == ["python"]


def test_unknown_keys_and_scalars_are_coerced():
    content = "---\ntitle: 2024\ngithub: https://github.com/me/site\nlayout: wide\n---\nBody"

    metadata, _ = parse_frontmatter(content)

    assert metadata.title == "2024"
    assert metadata.github == "https://github.com/me/site"


def test_quoted_date_is_kept_as_string():
    metadata, _ = parse_frontmatter('---\ndate: "2025-3-7"\n---\nBody')

    assert metadata.date == "2025-3-7"


def test_byte_order_mark_is_ignored():
    metadata, body = parse_frontmatter("\ufeff---\ntitle: BOM\n---\nBody")

    assert metadata.title == "BOM"
    assert body.strip() == "Body"


def test_invalid_yaml_raises():
    with pytest.raises(FrontmatterParsingError) as excinfo:
        parse_frontmatter("---\ntitle: [unclosed\n---\nBody", source="bad.md")

    assert isinstance(excinfo.value, DocumentParsingError)
    assert excinfo.value.path == "bad.md"
    assert "bad.md" in str(excinfo.value)


def test_uncoercible_value_raises():
    with pytest.raises(FrontmatterParsingError, match="weight"):
        parse_frontmatter("---\nweight: heavy\n---\nBody", source="heavy.md")
