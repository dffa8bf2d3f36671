"""Fence pairing: decide which fence pairs are frontmatter, noise, or ambiguous

Frontmatter looks like this:

    ---
    foo: bar
    ---

Not every pair of '---' lines is accepted; to avoid false positives:

- There must be the start/end of the document or an empty line before the
  opening fence and after the closing fence.
- There may be no empty line within the block, not even one holding only
  whitespace.
- The yaml must yield a mapping; strings, numbers, lists and null are not
  frontmatter.
- The fence must be made of exactly three dashes.

Authors who want an unambiguous horizontal rule either use another symbol
('***', '- - -', '----') or leave an empty line before AND after the three
dashes; both never yield diagnostics.
"""

import re
from typing import Any

import yaml

from mdfront.core.frontmatter.errors import MESSAGES
from mdfront.core.models import (
    Classified,
    Diagnostic,
    DiagnosticKind,
    Document,
    FenceCandidate,
    FenceKind,
    FrontmatterBlock,
)


EMPTY_LINE_RE = re.compile(r'\n[^\S\r\n]*\n')


def _sentinel(document: Document) -> FenceCandidate:
    """Synthetic end-of-document fence so a trailing fence still gets paired."""
    end = len(document.source)
    return FenceCandidate(
        node_index=len(document.children),
        kind=FenceKind.end,
        separator=(end, end),
        blank_before=True,
        blank_after=True,
    )


def _line(document: Document, idx: int) -> int:
    """End line of the node at idx; the fence is always the node's last line."""
    position = document.children[idx].position
    return position.end.line if position else 1


def _diagnostic(
    kind: DiagnosticKind,
    first: FenceCandidate,
    last: FenceCandidate,
    document: Document,
    cause: Exception = None,
    **fmt: Any,
    ) -> Diagnostic:
    """Build a Diagnostic spanning first..last (or first alone for the sentinel)."""
    if last.kind == FenceKind.end:
        last = first
    return Diagnostic(
        kind=kind,
        message=MESSAGES[kind].format(cause=cause, **fmt),
        excerpt=document.source[first.separator[0]:last.separator[1]],
        start=first.node_index,
        end=last.node_index,
        line=_line(document, first.node_index),
        cause=cause,
    )


def classify_pair(first: FenceCandidate, last: FenceCandidate, document: Document) -> Classified | None:
    """Classify one adjacent fence pair; None if the pair is plainly not frontmatter."""
    if first.standalone and last.standalone:
        return None
    if not first.blank_before:
        return _diagnostic(DiagnosticKind.missing_space_before, first, last, document)
    if last.kind == FenceKind.end:
        # an unclosed fence never carries a payload
        return _diagnostic(DiagnosticKind.missing_space_after, first, last, document)
    if not last.blank_after:
        return _diagnostic(DiagnosticKind.missing_space_after, first, last, document)

    text = document.source[first.separator[1]:last.separator[0]]
    if EMPTY_LINE_RE.search(text):
        return _diagnostic(DiagnosticKind.empty_line, first, last, document)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return _diagnostic(DiagnosticKind.corrupted_payload, first, last, document, cause=e)

    if not isinstance(data, dict):
        return _diagnostic(DiagnosticKind.forbidden_payload, first, last, document, type=type(data).__name__)

    return FrontmatterBlock(start=first.node_index, end=last.node_index, payload=data)


def _is_pseudo_gap(items: list[Classified], i: int) -> bool:
    """True for an adjacency diagnostic wedged against a decoded pair.

    The sliding window pairs a block's closing fence with the next block's
    opening fence; such a pair is never a block of its own. The same holds
    for the closing fence of a pair rejected for its payload.
    """
    item = items[i]
    if not isinstance(item, Diagnostic) or not item.kind.adjacency:
        return False
    nxt = items[i + 1] if i + 1 < len(items) else None
    prv = items[i - 1] if i > 0 else None
    return (
        (isinstance(nxt, FrontmatterBlock) and nxt.start == item.end)
        or (isinstance(prv, FrontmatterBlock) and prv.end == item.start)
        or (isinstance(prv, Diagnostic) and not prv.kind.adjacency and prv.end == item.start)
    )


def classify(candidates: list[FenceCandidate], document: Document) -> list[Classified]:
    """Pair consecutive fences and return blocks and diagnostics in document order."""
    fences = [*candidates, _sentinel(document)]
    items = [
        item
        for first, last in zip(fences, fences[1:])
        if (item := classify_pair(first, last, document)) is not None
    ]
    return [item for i, item in enumerate(items) if not _is_pseudo_gap(items, i)]
