"""Fence scanning: find '---' lines among top-level nodes using source offsets"""

import re

from mdfront.core.models import Document, FenceCandidate, FenceKind, Node, NodeKind


# Exactly three dashes at the start of a line, then only horizontal whitespace.
FENCE_RE = re.compile(r'(?:^|(?<=\n))(---[^\S\r\n]*)(?=\n|\Z)')


def _fence_kind(node: Node) -> FenceKind | None:
    """Return the fence kind for nodes that may act as a fence, else None."""
    if node.type == NodeKind.thematic_break:
        return FenceKind.thematic_break
    if node.type == NodeKind.heading and node.depth == 2:
        return FenceKind.heading
    return None


def _is_blank(line: str) -> bool:
    return not line.strip()


def blank_before(source: str, pos: int) -> bool:
    """True if pos starts the document or the preceding line is blank."""
    if pos == 0:
        return True
    line_end = pos - 1                          # source[line_end] is the newline
    line_start = source.rfind('\n', 0, line_end) + 1
    return _is_blank(source[line_start:line_end])


def blank_after(source: str, pos: int) -> bool:
    """True if pos ends the document or the following line is blank."""
    if pos >= len(source):
        return True
    line_start = pos + 1                        # source[pos] is the newline
    line_end = source.find('\n', line_start)
    if line_end == -1:
        line_end = len(source)
    return _is_blank(source[line_start:line_end])


def scan(document: Document) -> list[FenceCandidate]:
    """Return the fence candidates among the document's top-level nodes, in order."""
    source = document.source
    candidates: list[FenceCandidate] = []

    for idx, node in enumerate(document.children):
        kind = _fence_kind(node)
        if kind is None or node.position is None:
            continue

        offset = node.position.start.offset
        m = FENCE_RE.search(source[offset:node.position.end.offset])
        if not m:
            continue

        start, end = offset + m.start(1), offset + m.end(1)
        candidates.append(FenceCandidate(
            node_index=idx,
            kind=kind,
            separator=(start, end),
            blank_before=blank_before(source, start),
            blank_after=blank_after(source, end),
        ))

    return candidates
