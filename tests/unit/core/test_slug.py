"""Unit tests for core/utils/slug.py"""

import pytest

from mdfront.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


@pytest.mark.parametrize("text", ["", "!!!", "---"])
def test_slugify_falls_back_to_doc(text):
    """Text with nothing slug-worthy yields 'doc' so output files always have a name."""
    assert slugify(text) == "doc"


def test_slugify_non_string_frontmatter_value():
    """Frontmatter slugs may decode as numbers; they are slugified as text."""
    assert slugify(2024) == "2024"
