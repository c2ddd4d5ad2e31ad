import pytest

from moss.processing import generate_slug
from moss.processing.slugs import MAX_SLUG_LENGTH

SAMPLES = [
    "Hello World",
    "API & Docs",
    "C++ Programming",
    "Price: $99.99",
    "snake_case_name",
    "  --Leading and trailing--  ",
    "Café au lait",
    "100% #1 @home",
    "!!!",
    "",
    "a-" * 80,
    "x" * 250,
]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello World", "hello-world"),
        ("API & Docs", "api-and-docs"),
        ("C++ Programming", "cplusplus-programming"),
        ("Price: $99.99", "price-99.99"),
        ("snake_case_name", "snake-case-name"),
        ("100% #1 @home", "100percent-hash1-athome"),
        ("  --Leading and trailing--  ", "leading-and-trailing"),
        ("2025-01-15", "2025-01-15"),
        ("", "untitled"),
        ("!!!", "untitled"),
    ],
)
def test_generate_slug_examples(text, expected):
    assert generate_slug(text) == expected


@pytest.mark.parametrize("text", SAMPLES)
def test_generate_slug_is_idempotent(text):
    slug = generate_slug(text)
    assert generate_slug(slug) == slug


@pytest.mark.parametrize("text", SAMPLES)
def test_generate_slug_shape(text):
    slug = generate_slug(text)

    assert 0 < len(slug) <= MAX_SLUG_LENGTH
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug
    assert slug == slug.lower()


def test_generate_slug_truncates_long_text():
    assert generate_slug("x" * 250) == "x" * MAX_SLUG_LENGTH
