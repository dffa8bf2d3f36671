"""Unit tests for core/frontmatter/scan.py"""

import pytest

from mdfront.core.frontmatter.scan import blank_after, blank_before, scan
from mdfront.core.models import FenceCandidate, FenceKind, Node, NodeKind


def test_frontmatter_fences(md):
    """Both fences of a frontmatter block are found with their adjacency."""
    doc = md("---\nfoo: 42\n---\n")
    first, last = scan(doc)
    assert (first.node_index, first.kind) == (0, FenceKind.thematic_break)
    assert (last.node_index, last.kind) == (1, FenceKind.heading)
    assert (first.blank_before, first.blank_after) == (True, False)
    assert (last.blank_before, last.blank_after) == (False, True)


def test_separator_span_covers_dashes_and_trailing_space(md):
    """The separator span is the '---' line including trailing blanks, without the newline."""
    doc = md("Title\n---   \n")
    (fence,) = scan(doc)
    start, end = fence.separator
    assert doc.source[start:end] == "---   "


@pytest.mark.parametrize("text", [
    "Foo\n----\n",
    "Foo\n\n- - -\n",
    "Foo\n\n***\n",
    "Foo\n=====\n",
    "## Foo\n",
    "# ---\n",
    "Foo\n\n  ---\n",
])
def test_non_fences_ignored(md, text):
    """Four dashes, spaced dashes, asterisks, h1 underlines, ATX headings and indented rules never qualify."""
    assert scan(md(text)) == []


def test_only_h2_and_thematic_breaks_tested(md):
    """Paragraphs and code blocks containing '---' lines are not candidates."""
    doc = md("```\n---\n```\n\n> ---\n")
    assert scan(doc) == []


def test_nodes_without_position_skipped(md):
    """Nodes lacking position metadata are scan gaps, never candidates."""
    doc = md("---\n")
    doc.children.append(Node(type=NodeKind.thematic_break))
    assert [c.node_index for c in scan(doc)] == [0]


def test_whitespace_only_lines_count_as_blank(md):
    """A neighbouring line holding only whitespace counts as blank."""
    doc = md("Foo\n   \n---\n \t \nBar\n")
    (fence,) = scan(doc)
    assert fence.blank_before and fence.blank_after


@pytest.mark.parametrize("source,pos,expected", [
    ("---", 0, True),
    ("Foo\n---", 4, False),
    ("Foo\n\n---", 5, True),
    ("\n---", 1, True),
])
def test_blank_before(source, pos, expected):
    """blank_before is vacuously true at the document start."""
    assert blank_before(source, pos) is expected


@pytest.mark.parametrize("source,pos,expected", [
    ("---", 3, True),
    ("---\n", 3, True),
    ("---\nFoo", 3, False),
    ("---\n\nFoo", 3, True),
])
def test_blank_after(source, pos, expected):
    """blank_after is vacuously true at the document end."""
    assert blank_after(source, pos) is expected


def test_standalone():
    """Pure rules and heading underlines followed by a blank line are standalone."""
    hr = FenceCandidate(0, FenceKind.thematic_break, (0, 3), True, True)
    underline = FenceCandidate(0, FenceKind.heading, (0, 3), False, True)
    opening = FenceCandidate(0, FenceKind.thematic_break, (0, 3), True, False)
    closing_rule = FenceCandidate(0, FenceKind.thematic_break, (0, 3), False, True)
    assert hr.standalone and underline.standalone
    assert not opening.standalone and not closing_rule.standalone
